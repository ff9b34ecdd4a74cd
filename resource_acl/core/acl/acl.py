"""Access control list entity shape and its in-memory implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from resource_acl.core.acl.ace import Ace

__all__ = ["Acl", "AclImpl"]


@runtime_checkable
class Acl(Protocol):
    """Anything exposing an owner and a permission -> Ace mapping.

    Persisted entities of the calling application only need to satisfy
    this protocol to be read by the builder and the access controller.
    """

    @property
    def owner(self) -> str | None: ...

    def entry_map(self) -> Mapping[str, Ace]: ...


class AclImpl:
    """Lightweight in-memory :class:`Acl`.

    The mapping is copied on construction; the Ace objects are not.

    Example:
        >>> acl = AclImpl("alice", {"read": Ace(guest=True)})
        >>> acl.owner
        'alice'
    """

    __slots__ = ("_entries", "_owner")

    def __init__(
        self,
        owner: str | None = None,
        entries: Mapping[str, Ace] | None = None,
    ) -> None:
        self._owner = owner
        self._entries: dict[str, Ace] = dict(entries or {})

    @property
    def owner(self) -> str | None:
        return self._owner

    def entry_map(self) -> dict[str, Ace]:
        return self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AclImpl):
            return NotImplemented
        return self._owner == other._owner and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AclImpl(owner={self._owner!r}, entries={self._entries!r})"
