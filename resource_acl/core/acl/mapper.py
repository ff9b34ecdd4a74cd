"""Mapping between transport values and acl entities.

Admin access is an overlay derived from configuration, not stored state:
with ``switch_admin_access`` enabled the configured admin roles are removed
from every outgoing transport value and granted again on every entity
created from one.

Example:
    >>> mapper = AclMapperImpl(
    ...     entity_factory(),
    ...     default_permissions=ALL_PERMISSIONS,
    ...     switch_admin_access=True,
    ... )
    >>> entity = mapper.map_to_acl(dto)        # ROLE_ADMIN granted everywhere
    >>> dto = mapper.map_to_access_control_list(entity)  # ROLE_ADMIN stripped
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from resource_acl.core.acl.builder import AclBuilder
from resource_acl.core.acl.constants import ADMIN_ROLE_NAME
from resource_acl.core.acl.factory import entity_factory
from resource_acl.core.acl.permission import has_text, normalize_permissions
from resource_acl.core.exceptions import AclConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resource_acl.core.acl.acl import Acl
    from resource_acl.core.acl.factory import AclFactory
    from resource_acl.core.acl.schemas import AccessControlList
    from resource_acl.core.settings.access_control import AccessControlSettings

T = TypeVar("T")

logger = logging.getLogger(__name__)

__all__ = ["AclMapper", "AclMapperImpl", "create_acl_mapper"]


class AclMapper(Protocol[T]):
    """Maps acls between their transport and entity representations."""

    @property
    def acl_factory(self) -> AclFactory[T]: ...

    def default_access_control_list(self, owner: str | None) -> AccessControlList: ...

    def default_acl(self, owner: str | None) -> T: ...

    def map_to_access_control_list(self, acl: Acl | None) -> AccessControlList | None: ...

    def map_to_acl(self, access_control_list: AccessControlList | None) -> T | None: ...


class AclMapperImpl(Generic[T]):
    """Default :class:`AclMapper`.

    Args:
        acl_factory: Creates the entity type.
        default_permissions: Permissions every acl gets an entry for.
        switch_admin_access: Strip admin roles on the way out and grant them
            on the way in.
        return_null: Map ``None`` to ``None`` instead of to an acl built
            from the defaults.
        admin_roles: The admin role names; defaults to ``ROLE_ADMIN``.

    Raises:
        AclConfigurationError: If no factory is given.
    """

    def __init__(
        self,
        acl_factory: AclFactory[T],
        default_permissions: Iterable[str] | None = None,
        switch_admin_access: bool = False,
        return_null: bool = False,
        admin_roles: Iterable[str] | None = None,
    ) -> None:
        if acl_factory is None:
            raise AclConfigurationError(
                detail="Acl factory must not be None.",
                extra={"setting": "acl_factory"},
            )
        self._acl_factory = acl_factory
        self._default_permissions = tuple(normalize_permissions(default_permissions))
        self._switch_admin_access = switch_admin_access
        self._return_null = return_null
        self._admin_roles: frozenset[str] = frozenset()
        self.admin_roles = [ADMIN_ROLE_NAME] if admin_roles is None else admin_roles

    @property
    def acl_factory(self) -> AclFactory[T]:
        return self._acl_factory

    @property
    def default_permissions(self) -> tuple[str, ...]:
        return self._default_permissions

    @property
    def switch_admin_access(self) -> bool:
        return self._switch_admin_access

    @property
    def return_null(self) -> bool:
        return self._return_null

    @property
    def admin_roles(self) -> frozenset[str]:
        return self._admin_roles

    @admin_roles.setter
    def admin_roles(self, admin_roles: Iterable[str] | None) -> None:
        if isinstance(admin_roles, str):
            admin_roles = [admin_roles]
        self._admin_roles = frozenset(role for role in admin_roles or () if has_text(role))

    def default_access_control_list(self, owner: str | None) -> AccessControlList:
        """Transport value for a new resource: the owner holds every default."""
        return (
            AclBuilder()
            .owner(owner)
            .add_user(owner, *self._default_permissions)
            .build_access_control_list()
        )

    def default_acl(self, owner: str | None) -> T:
        """Entity for a new resource: the owner holds every default."""
        builder = AclBuilder().owner(owner).add_user(owner, *self._default_permissions)
        if self._switch_admin_access:
            builder.ensure_admin_access(self._admin_roles)
        return builder.build(self._acl_factory)

    def map_to_access_control_list(self, acl: Acl | None) -> AccessControlList | None:
        """Map an entity to a transport value without the admin overlay."""
        if acl is None and self._return_null:
            return None
        builder = AclBuilder().from_acl(acl).defaults(*self._default_permissions)
        if self._switch_admin_access:
            builder.remove_admin_access(self._admin_roles)
        return builder.build_access_control_list()

    def map_to_acl(self, access_control_list: AccessControlList | None) -> T | None:
        """Map a transport value to an entity with the admin overlay."""
        if access_control_list is None and self._return_null:
            return None
        builder = (
            AclBuilder()
            .from_access_control_list(access_control_list)
            .defaults(*self._default_permissions)
        )
        if self._switch_admin_access:
            builder.ensure_admin_access(self._admin_roles)
        return builder.build(self._acl_factory)


def create_acl_mapper(
    acl_factory: AclFactory[T] | None = None,
    settings: AccessControlSettings | None = None,
) -> AclMapperImpl[T]:
    """Create a mapper from access control settings.

    Args:
        acl_factory: Creates the entity type; the in-memory entity factory
            is used when omitted.
        settings: Settings to use; loaded via
            ``get_access_control_settings()`` when omitted.
    """
    if settings is None:
        from resource_acl.core.settings import get_access_control_settings

        settings = get_access_control_settings()

    factory = acl_factory if acl_factory is not None else entity_factory()
    logger.info(
        "Creating acl mapper: factory=%s, default_permissions=%s, admin_roles=%s, "
        "switch_admin_access=%s, return_null=%s",
        type(factory).__name__,
        list(settings.default_permissions),
        list(settings.admin_roles),
        settings.switch_admin_access,
        settings.return_null,
    )
    return AclMapperImpl(
        factory,
        default_permissions=settings.default_permissions,
        switch_admin_access=settings.switch_admin_access,
        return_null=settings.return_null,
        admin_roles=settings.admin_roles,
    )
