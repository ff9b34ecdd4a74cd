"""Permission value type.

Permissions are compared case-insensitively. Instead of lower-casing at
every insertion and lookup, a :class:`Permission` is lower-cased once when
it is constructed and can then be used directly as a dictionary key.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["Permission", "flatten", "has_text", "normalize_permissions"]


def has_text(value: Any) -> bool:
    """Return True for a string containing at least one non-whitespace char."""
    return isinstance(value, str) and bool(value.strip())


class Permission(str):
    """Lower-case permission name.

    Example:
        >>> Permission("Read")
        'read'
        >>> Permission.parse("  ") is None
        True
    """

    __slots__ = ()

    def __new__(cls, value: str | Enum) -> Permission:
        if isinstance(value, Permission):
            return value
        raw = value.value if isinstance(value, Enum) else value
        return super().__new__(cls, str(raw).lower())

    @classmethod
    def parse(cls, value: Any) -> Permission | None:
        """Normalize ``value``, or return None when it is not a usable permission."""
        if isinstance(value, Enum):
            value = value.value
        if not has_text(value):
            return None
        return cls(value)


def flatten(values: Iterable[Any]) -> Iterator[Any]:
    """Yield values, expanding nested iterables (other than strings) one level deep.

    Lets ``defaults("read", "write")`` and ``defaults(["read", "write"])``
    behave the same.
    """
    for value in values:
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Enum)):
            yield from value
        else:
            yield value


def normalize_permissions(values: Iterable[Any] | None) -> list[Permission]:
    """Normalize permissions, dropping blanks and duplicates but keeping order."""
    if values is None:
        return []
    result: dict[Permission, None] = {}
    for value in flatten(values):
        permission = Permission.parse(value)
        if permission is not None:
            result.setdefault(permission)
    return list(result)
