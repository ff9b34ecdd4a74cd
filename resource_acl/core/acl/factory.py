"""Strategies turning an (owner, entries) snapshot into an output type.

An :class:`AclFactory` is anything with a ``create_access_control_list``
method. :meth:`AclBuilder.build` also accepts a plain callable with the same
signature, so a class like :class:`AclImpl` can be used as a factory
directly.
"""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from resource_acl.core.acl.acl import AclImpl
from resource_acl.core.acl.schemas import AccessControlEntry, AccessControlList

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from resource_acl.core.acl.ace import Ace

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

__all__ = [
    "AclFactory",
    "CallableAclFactory",
    "DtoAclFactory",
    "EntityAclFactory",
    "dto_factory",
    "entity_factory",
    "factory_of",
]


class AclFactory(Protocol[T_co]):
    """Creates an access control list of a specific type."""

    def create_access_control_list(
        self, owner: str | None, entries: Mapping[str, Ace] | None
    ) -> T_co: ...


class CallableAclFactory(Generic[T]):
    """Adapts a ``(owner, entries) -> T`` callable to :class:`AclFactory`."""

    def __init__(self, func: Callable[[str | None, Mapping[str, Ace]], T]) -> None:
        self._func = func

    def create_access_control_list(
        self, owner: str | None, entries: Mapping[str, Ace] | None
    ) -> T:
        return self._func(owner, entries or {})


class DtoAclFactory:
    """Creates sorted, immutable :class:`AccessControlList` values.

    Entries are ordered by permission and principals alphabetically, so an
    unchanged ACL always serializes to the same bytes.
    """

    def create_access_control_list(
        self, owner: str | None, entries: Mapping[str, Ace] | None
    ) -> AccessControlList:
        if entries is None:
            return AccessControlList(owner=owner)
        dto_entries = sorted(
            (
                AccessControlEntry(
                    permission=str(permission),
                    guest=ace.guest,
                    users=tuple(sorted(ace.users)),
                    roles=tuple(sorted(ace.roles)),
                    groups=tuple(sorted(ace.groups)),
                )
                for permission, ace in entries.items()
            ),
            key=attrgetter("permission"),
        )
        return AccessControlList(owner=owner, entries=tuple(dto_entries))


class EntityAclFactory:
    """Wraps the snapshot into an :class:`AclImpl`."""

    def create_access_control_list(
        self, owner: str | None, entries: Mapping[str, Ace] | None
    ) -> AclImpl:
        return AclImpl(owner, entries)


_DTO_FACTORY = DtoAclFactory()
_ENTITY_FACTORY = EntityAclFactory()


def dto_factory() -> DtoAclFactory:
    """Return the transport value factory."""
    return _DTO_FACTORY


def entity_factory() -> EntityAclFactory:
    """Return the in-memory entity factory."""
    return _ENTITY_FACTORY


def factory_of(func: Callable[[str | None, Mapping[str, Ace]], T]) -> AclFactory[T]:
    """Create a factory from a callable (e.g. an entity class constructor)."""
    return CallableAclFactory(func)
