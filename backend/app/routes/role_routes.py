"""
Role Routes Module
==================

Read-only catalog of the roles known to the compliance tracker.

Features:
- List every role in display order (for role-selection controls)
- Look up a single role by its display string

Nothing here assigns, grants or checks roles.
"""

from fastapi import APIRouter

from app.core.exceptions import RoleNotFoundError
from app.core.logging import get_logger
from app.models.role_enum import ALL_ROLES, Role
from app.schemas import ErrorResponse, RoleListResponse, RoleResponse

# Initialize logger
logger = get_logger(__name__)


# =====================================
# Router Setup
# =====================================

router = APIRouter(
    prefix="/roles",
    tags=["Roles"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.get(
    "",
    response_model=RoleListResponse,
    summary="List Roles",
    description="Returns every known role in display order.",
)
def list_roles() -> RoleListResponse:
    """
    List all roles.

    Returns:
        Every role, ordered as ALL_ROLES
    """
    roles = [RoleResponse.from_role(Role(name)) for name in ALL_ROLES]
    logger.debug("roles_listed", total=len(roles))
    return RoleListResponse(roles=roles, total=len(roles))


@router.get(
    "/{role_name}",
    response_model=RoleResponse,
    summary="Get Role",
    description="Looks up a role by its exact display string.",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown role"},
    },
)
def get_role(role_name: str) -> RoleResponse:
    """
    Get a single role.

    Matching is exact and case-sensitive, the same comparison
    consumers use against stored role values.

    Raises:
        RoleNotFoundError: If role_name is not a known role
    """
    if role_name not in ALL_ROLES:
        logger.info("role_lookup_miss", role=role_name)
        raise RoleNotFoundError(role_name)

    return RoleResponse.from_role(Role(role_name))
