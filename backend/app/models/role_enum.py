"""
Role Enumeration Module
=======================

Defines the closed set of roles recognized by the compliance tracker.

Exports:
- Role: string enumeration of every role
- ADMIN, ISSM, ISSO, SYSTEM_ADMIN, AUDITOR: the role display strings
- ALL_ROLES: every role string, in display order

The values are compared by string against user records, permission
checks and UI role pickers owned by other components. Order is for
display only and carries no precedence.
"""

from enum import StrEnum
from typing import Final


class Role(StrEnum):
    """
    System-wide allowed roles.

    Values are the display strings stored and compared by consumers.
    """

    ADMIN = "Admin"
    ISSM = "ISSM"
    ISSO = "ISSO"
    SYSTEM_ADMIN = "System Admin"
    AUDITOR = "Auditor"


ADMIN: Final[str] = Role.ADMIN.value
ISSM: Final[str] = Role.ISSM.value
ISSO: Final[str] = Role.ISSO.value
SYSTEM_ADMIN: Final[str] = Role.SYSTEM_ADMIN.value
AUDITOR: Final[str] = Role.AUDITOR.value

# Enum iteration follows declaration order
ALL_ROLES: Final[tuple[str, ...]] = tuple(role.value for role in Role)
