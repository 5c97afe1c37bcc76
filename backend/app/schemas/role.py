"""
Role Schemas Module
===================

Pydantic models for the read-only role catalog responses.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.role_enum import Role


class RoleResponse(BaseModel):
    """A single role as shown to role pickers and consumers."""

    name: str = Field(
        ...,
        description="Role display string, compared by value"
    )
    key: str = Field(
        ...,
        description="Stable enumeration key of the role"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "System Admin",
                "key": "SYSTEM_ADMIN"
            }
        }
    )

    @classmethod
    def from_role(cls, role: Role) -> "RoleResponse":
        return cls(name=role.value, key=role.name)


class RoleListResponse(BaseModel):
    """All known roles in display order."""

    roles: list[RoleResponse]
    total: int


# ==========================
# Error Schemas
# ==========================

class ErrorResponse(BaseModel):
    """Standard error response schema."""

    message: str = Field(
        ...,
        description="Error message"
    )
    details: Optional[dict] = Field(
        default=None,
        description="Additional error details"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Role not found",
                "details": {"resource": "Role", "identifier": "Guest"}
            }
        }
    )
