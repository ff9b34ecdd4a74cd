"""Access control entry."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Ace"]


@dataclass
class Ace:
    """Grants of a single permission.

    Attributes:
        guest: Whether the permission is open to any caller.
        users: User identifiers holding the permission.
        roles: Role names holding the permission.
        groups: Group names holding the permission.
    """

    guest: bool = False
    users: set[str] = field(default_factory=set)
    roles: set[str] = field(default_factory=set)
    groups: set[str] = field(default_factory=set)

    def copy(self) -> Ace:
        """Return an independent copy (the principal sets are copied too)."""
        return Ace(
            guest=self.guest,
            users=set(self.users),
            roles=set(self.roles),
            groups=set(self.groups),
        )

    @property
    def is_empty(self) -> bool:
        """True when nobody, not even guests, is granted."""
        return not (self.guest or self.users or self.roles or self.groups)
