"""
Compliance Tracker - Logging Infrastructure

This module provides structured logging with support for:
- JSON formatted logs for production
- Console formatted logs for development
- Request ID binding for tracing
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

import structlog
from structlog.types import Processor

from app.core.config import Settings, get_settings

# Context variable for request tracing
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def add_context_variables(
    logger: logging.Logger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add the current request_id to log entries."""
    request_id = request_id_context.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def get_log_level(settings: Settings) -> int:
    """Convert string log level to logging constant."""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(settings.LOG_LEVEL.upper(), logging.INFO)


def get_processors(settings: Settings) -> list[Processor]:
    """Get structlog processors based on settings."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_variables,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging for the application.

    This should be called once at application startup.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=get_log_level(settings),
    )

    structlog.configure(
        processors=get_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A structlog BoundLogger instance.

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("roles_listed", total=5)
    """
    return structlog.get_logger(name)


class LogContext:
    """
    Context manager for setting the request ID on log entries.

    Example:
        >>> with LogContext(request_id="req-123"):
        ...     log.info("role_lookup")
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id
        self._token: Optional[Token] = None

    def __enter__(self) -> "LogContext":
        if self.request_id:
            self._token = request_id_context.set(self.request_id)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._token is not None:
            request_id_context.reset(self._token)
            self._token = None
