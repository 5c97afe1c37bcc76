"""
Model Package Initialization
============================

Exports the role registry.

Usage:
    from app.models import Role, ALL_ROLES
"""

from .role_enum import (
    ADMIN,
    ALL_ROLES,
    AUDITOR,
    ISSM,
    ISSO,
    SYSTEM_ADMIN,
    Role,
)

__all__ = [
    "Role",
    "ADMIN",
    "ISSM",
    "ISSO",
    "SYSTEM_ADMIN",
    "AUDITOR",
    "ALL_ROLES",
]
