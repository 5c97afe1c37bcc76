"""
Application configuration module.

Provides centralized, environment-driven configuration management
with sensible defaults.
"""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables
    or a local .env file.

    Attributes:
        APP_NAME: Application name.
        APP_VERSION: Application version.
        ENVIRONMENT: Deployment environment.
        DEBUG: Debug mode flag, also toggles the OpenAPI docs.
        LOG_LEVEL: Logging level.
        LOG_FORMAT: "console" for development, "json" for log shipping.
        CORS_ORIGINS: Comma separated list of allowed origins.
        API_PREFIX: Mount point for the role catalog routes.
    """

    # Application metadata
    APP_NAME: str = Field(default="Compliance Tracker Role Registry")
    APP_VERSION: str = Field(default="1.0.0")
    ENVIRONMENT: Literal["development", "testing", "production"] = Field(default="development")
    DEBUG: bool = Field(default=False)

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: Literal["console", "json"] = Field(default="console")

    # HTTP configuration
    CORS_ORIGINS: str = Field(default="*")
    API_PREFIX: str = Field(default="/api/v1")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Ensure the prefix starts with a slash and has no trailing slash."""
        prefix = "/" + v.strip("/")
        return "" if prefix == "/" else prefix

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.info(f"Settings loaded: app_name={_settings.APP_NAME}, environment={_settings.ENVIRONMENT}")
    return _settings


settings = get_settings()
