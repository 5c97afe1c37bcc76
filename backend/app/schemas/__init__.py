"""
Schemas Package Initialization
==============================

Exports all Pydantic schemas for the application.

Usage:
    from app.schemas import RoleResponse, RoleListResponse
"""

from app.schemas.role import (
    ErrorResponse,
    RoleListResponse,
    RoleResponse,
)

__all__ = [
    "RoleResponse",
    "RoleListResponse",
    "ErrorResponse",
]
