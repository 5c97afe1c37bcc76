"""
Centralized Exception Handling Module
=====================================

Defines custom exception classes for the application.

The role registry itself never raises; these exceptions cover the
HTTP surface built around it.

Usage:
    raise RoleNotFoundError("Guest")
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status

from app.models.role_enum import ALL_ROLES


class ComplianceTrackerException(Exception):
    """
    Base exception class for the Compliance Tracker application.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ==========================
# Resource Exceptions
# ==========================

class NotFoundError(ComplianceTrackerException):
    """Raised when a resource is not found."""

    def __init__(self, resource: str = "Resource", identifier: Optional[str] = None):
        message = f"{resource} not found"
        details: Dict[str, Any] = {"resource": resource}
        if identifier:
            details["identifier"] = identifier
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class RoleNotFoundError(NotFoundError):
    """Raised when a role string is not one of the known roles."""

    def __init__(self, role_name: str):
        super().__init__(resource="Role", identifier=role_name)
        self.details["valid_roles"] = list(ALL_ROLES)


# ==========================
# Helper Functions
# ==========================

def exception_to_http_exception(exc: ComplianceTrackerException) -> HTTPException:
    """
    Convert a ComplianceTrackerException to FastAPI HTTPException.

    Args:
        exc: ComplianceTrackerException instance

    Returns:
        HTTPException with appropriate status code and detail
    """
    return HTTPException(
        status_code=exc.status_code,
        detail={
            "message": exc.message,
            "details": exc.details,
        }
    )
