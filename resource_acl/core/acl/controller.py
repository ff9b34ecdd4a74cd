"""Permission evaluation over a materialized access control list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from resource_acl.core.acl.builder import AclBuilder
from resource_acl.core.acl.permission import Permission, flatten

if TYPE_CHECKING:
    from collections.abc import Collection

    from resource_acl.core.acl.acl import Acl
    from resource_acl.core.acl.schemas import AccessControlList

logger = logging.getLogger(__name__)

__all__ = ["AccessController"]


class AccessController:
    """Answers whether a principal holds a permission on one resource.

    The controller never modifies the acl it wraps. A controller without an
    acl grants nothing.

    Example:
        >>> controller = AccessController.from_access_control_list(dto)
        >>> controller.has_permission("bob", ["ROLE_USER"], [], "read")
        True
    """

    __slots__ = ("_acl",)

    def __init__(self, acl: Acl | None = None) -> None:
        self._acl = acl

    @classmethod
    def empty(cls) -> AccessController:
        """Create a controller that grants nothing."""
        return cls()

    @classmethod
    def from_access_control_list(cls, acl: AccessControlList | None) -> AccessController:
        """Create a controller from a transport value."""
        if acl is None:
            return cls()
        return cls(AclBuilder().from_access_control_list(acl).build_acl())

    @classmethod
    def from_acl(cls, acl: Acl | None) -> AccessController:
        """Create a controller from an acl entity (its entries are copied)."""
        if acl is None:
            return cls()
        return cls(AclBuilder().from_acl(acl).build_acl())

    def has_permission(
        self,
        user: str | None,
        roles: Collection[str] | None,
        groups: Collection[str] | None,
        permission: Any,
    ) -> bool:
        """Check a single permission.

        The owner holds every permission. Otherwise the entry of the
        permission decides: guest access, then the user, then any of the
        roles, then any of the groups.

        Args:
            user: The user identifier (may be None for anonymous callers).
            roles: The caller's role names.
            groups: The caller's group names.
            permission: The permission (case-insensitive).

        Returns:
            True if the permission is granted, otherwise False.
        """
        if self._acl is None:
            return False
        key = Permission.parse(permission)
        if key is None:
            return False
        if user is not None and user == self._acl.owner:
            return True
        entries = self._acl.entry_map()
        if entries is None:
            return False
        ace = entries.get(key)
        if ace is None:
            return False
        if ace.guest:
            return True
        users = ace.users or ()
        if user is not None and user in users:
            return True
        ace_roles = ace.roles or ()
        if roles and any(role in ace_roles for role in roles):
            return True
        ace_groups = ace.groups or ()
        return bool(groups) and any(group in ace_groups for group in groups)

    def has_any_permission(
        self,
        user: str | None,
        roles: Collection[str] | None,
        groups: Collection[str] | None,
        *permissions: Any,
    ) -> bool:
        """Check that at least one permission is granted.

        Permissions may be passed individually or as one collection. No
        permissions at all yields False.
        """
        requested = list(flatten(permissions))
        granted = bool(requested) and any(
            self.has_permission(user, roles, groups, p) for p in requested
        )
        logger.debug(
            "Any of %s %s for user=%s", requested, "granted" if granted else "denied", user
        )
        return granted

    def has_all_permissions(
        self,
        user: str | None,
        roles: Collection[str] | None,
        groups: Collection[str] | None,
        *permissions: Any,
    ) -> bool:
        """Check that every permission is granted.

        No permissions at all yields False, not True.
        """
        requested = list(flatten(permissions))
        granted = bool(requested) and all(
            self.has_permission(user, roles, groups, p) for p in requested
        )
        logger.debug(
            "All of %s %s for user=%s", requested, "granted" if granted else "denied", user
        )
        return granted
