"""Fluent construction and merging of access control lists.

The builder is the only place where entries are created or changed. Every
method tolerates ``None``, blank and otherwise malformed arguments by doing
nothing, and returns the builder so calls can be chained:

    >>> from resource_acl.core.acl.builder import AclBuilder
    >>> acl = (
    ...     AclBuilder()
    ...     .owner("alice")
    ...     .defaults("read", "write")
    ...     .add_user("bob", "read")
    ...     .guest(True, "read")
    ...     .build_access_control_list()
    ... )
    >>> [entry.permission for entry in acl.entries]
    ['read', 'write']

Entries are created lazily. A permission without an entry means that only
the owner may use it; an entry with empty principal sets is kept as is.
Granting guest access creates the entry, revoking it never does.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from resource_acl.core.acl.ace import Ace
from resource_acl.core.acl.constants import ADMIN_ROLE_NAME
from resource_acl.core.acl.factory import dto_factory, entity_factory
from resource_acl.core.acl.permission import (
    Permission,
    flatten,
    has_text,
    normalize_permissions,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from resource_acl.core.acl.acl import Acl, AclImpl
    from resource_acl.core.acl.factory import AclFactory
    from resource_acl.core.acl.schemas import AccessControlList

T = TypeVar("T")

logger = logging.getLogger(__name__)

__all__ = ["AclBuilder", "builder"]


def _role_names(roles: str | Iterable[str] | None) -> list[str]:
    if roles is None:
        return []
    if isinstance(roles, str):
        return [roles] if has_text(roles) else []
    return list(dict.fromkeys(role for role in roles if has_text(role)))


class AclBuilder:
    """Mutable builder of an owner plus permission -> :class:`Ace` entries.

    A builder is meant for a single construction session and is not safe
    for concurrent use.
    """

    def __init__(self) -> None:
        self._owner: str | None = None
        self._entries: dict[Permission, Ace] = {}

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def reset(self) -> AclBuilder:
        """Clear owner and entries."""
        self._owner = None
        self._entries = {}
        return self

    def defaults(self, *permissions: Any) -> AclBuilder:
        """Create an empty entry for each permission that has none yet."""
        for permission in normalize_permissions(permissions):
            self._entries.setdefault(permission, Ace())
        return self

    def from_access_control_list(self, acl: AccessControlList | None) -> AclBuilder:
        """Merge the owner and entries of a transport value into this builder."""
        if acl is None:
            return self
        self._owner = acl.owner
        for entry in acl.entries or ():
            if entry is None or not has_text(entry.permission):
                continue
            permission = Permission(entry.permission)
            self.guest(entry.guest, permission)
            for group in entry.groups or ():
                self.add_group(group, permission)
            for role in entry.roles or ():
                self.add_role(role, permission)
            for user in entry.users or ():
                self.add_user(user, permission)
        logger.debug(
            "Loaded access control list: owner=%s, permissions=%s",
            self._owner,
            sorted(self._entries),
        )
        return self

    def from_acl(self, acl: Acl | None) -> AclBuilder:
        """Merge the owner and entries of an entity into this builder."""
        if acl is None:
            return self
        self._owner = acl.owner
        entries = acl.entry_map()
        for key, ace in (entries or {}).items():
            if ace is None or not has_text(key):
                continue
            permission = Permission(key)
            self.guest(ace.guest, permission)
            for group in ace.groups or ():
                self.add_group(group, permission)
            for role in ace.roles or ():
                self.add_role(role, permission)
            for user in ace.users or ():
                self.add_user(user, permission)
        logger.debug(
            "Loaded acl entity: owner=%s, permissions=%s",
            self._owner,
            sorted(self._entries),
        )
        return self

    def owner(self, owner: str | None) -> AclBuilder:
        """Set the owner. Entries are not touched."""
        self._owner = owner
        return self

    # ------------------------------------------------------------------
    # Grants
    # ------------------------------------------------------------------

    def guest(self, is_public: bool | None, *permissions: Any) -> AclBuilder:
        """Open (``True``) or close (``False``/``None``) permissions to guests.

        Opening creates missing entries; closing only touches existing ones.
        """
        if is_public is True:
            for permission in normalize_permissions(permissions):
                self._entries.setdefault(permission, Ace()).guest = True
        else:
            for permission in normalize_permissions(permissions):
                ace = self._entries.get(permission)
                if ace is not None:
                    ace.guest = False
        return self

    def add_user(self, user: str | None, *permissions: Any) -> AclBuilder:
        """Grant the permissions to a user."""
        if has_text(user):
            for ace in self._ensure_entries(permissions):
                ace.users.add(user)
        return self

    def add_role(self, role: str | None, *permissions: Any) -> AclBuilder:
        """Grant the permissions to a role."""
        if has_text(role):
            for ace in self._ensure_entries(permissions):
                ace.roles.add(role)
        return self

    def add_group(self, group: str | None, *permissions: Any) -> AclBuilder:
        """Grant the permissions to a group."""
        if has_text(group):
            for ace in self._ensure_entries(permissions):
                ace.groups.add(group)
        return self

    def remove_user(self, user: str | None, *permissions: Any) -> AclBuilder:
        """Revoke the permissions from a user. Missing entries are ignored."""
        if has_text(user):
            for ace in self._existing_entries(permissions):
                ace.users.discard(user)
        return self

    def remove_role(self, role: str | None, *permissions: Any) -> AclBuilder:
        """Revoke the permissions from a role. Missing entries are ignored."""
        if has_text(role):
            for ace in self._existing_entries(permissions):
                ace.roles.discard(role)
        return self

    def remove_group(self, group: str | None, *permissions: Any) -> AclBuilder:
        """Revoke the permissions from a group. Missing entries are ignored."""
        if has_text(group):
            for ace in self._existing_entries(permissions):
                ace.groups.discard(group)
        return self

    # ------------------------------------------------------------------
    # Admin overlay
    # ------------------------------------------------------------------

    def ensure_admin_access(
        self,
        admin_roles: str | Iterable[str] | None = ADMIN_ROLE_NAME,
        *permissions: Any,
    ) -> AclBuilder:
        """Grant admin roles.

        Without permissions, every permission that already has an entry is
        granted; no new permissions are introduced.

        Args:
            admin_roles: A role name or a collection of role names.
            *permissions: The permissions to grant.
        """
        roles = _role_names(admin_roles)
        if not roles:
            return self
        targets = self._admin_targets(permissions)
        for role in roles:
            self.add_role(role, *targets)
        return self

    def remove_admin_access(
        self,
        admin_roles: str | Iterable[str] | None = ADMIN_ROLE_NAME,
        *permissions: Any,
    ) -> AclBuilder:
        """Revoke admin roles; see :meth:`ensure_admin_access`."""
        roles = _role_names(admin_roles)
        if not roles:
            return self
        targets = self._admin_targets(permissions)
        for role in roles:
            self.remove_role(role, *targets)
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(
        self,
        factory: AclFactory[T] | Callable[[str | None, Mapping[str, Ace]], T],
    ) -> T:
        """Materialize the current state with ``factory``.

        The factory receives a copy of the entries, so the result is not
        affected by later changes to this builder. Exceptions raised by the
        factory propagate unchanged.
        """
        snapshot = {permission: ace.copy() for permission, ace in self._entries.items()}
        create = getattr(factory, "create_access_control_list", factory)
        return create(self._owner, snapshot)

    def build_acl(self) -> AclImpl:
        """Build an in-memory acl entity."""
        return self.build(entity_factory())

    def build_access_control_list(self) -> AccessControlList:
        """Build a sorted transport value."""
        return self.build(dto_factory())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_entries(self, permissions: Iterable[Any]) -> list[Ace]:
        return [
            self._entries.setdefault(permission, Ace())
            for permission in normalize_permissions(permissions)
        ]

    def _existing_entries(self, permissions: Iterable[Any]) -> list[Ace]:
        return [
            self._entries[permission]
            for permission in normalize_permissions(permissions)
            if permission in self._entries
        ]

    def _admin_targets(self, permissions: Iterable[Any]) -> list[Any]:
        requested = list(flatten(permissions))
        if not requested:
            return list(self._entries)
        return requested


def builder() -> AclBuilder:
    """Create a new, empty builder."""
    return AclBuilder()
