"""Conventional permission and role names.

Permissions are free-form strings; the values below are only the ones most
resources share. Any other (non-blank) string is a valid permission.

Example:
    >>> from resource_acl.core.acl.constants import StandardPermission, READ
    >>> StandardPermission.READ.value == READ
    True
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ADMINISTRATION",
    "ADMIN_ROLE_NAME",
    "ALL_PERMISSIONS",
    "CREATE",
    "DELETE",
    "READ",
    "StandardPermission",
    "WRITE",
]


# =============================================================================
# Standard Permissions
# =============================================================================


class StandardPermission(str, Enum):
    """Standard permission names.

    Members can be passed anywhere a permission string is accepted.
    """

    ADMINISTRATION = "administration"
    CREATE = "create"
    DELETE = "delete"
    READ = "read"
    WRITE = "write"


ADMINISTRATION = StandardPermission.ADMINISTRATION.value
CREATE = StandardPermission.CREATE.value
DELETE = StandardPermission.DELETE.value
READ = StandardPermission.READ.value
WRITE = StandardPermission.WRITE.value

ALL_PERMISSIONS: tuple[str, ...] = tuple(member.value for member in StandardPermission)


# =============================================================================
# Roles
# =============================================================================

# Role granted to every existing entry by the admin overlay
ADMIN_ROLE_NAME = "ROLE_ADMIN"
