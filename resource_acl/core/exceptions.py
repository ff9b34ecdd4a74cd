"""Custom exception classes for the package.

The evaluation engine itself does not raise for bad input: blank
permissions, missing entries and empty collections simply deny access or
leave the builder unchanged. Exceptions raised by caller-supplied factories
propagate untouched. The classes below cover the remaining cases, which are
all configuration problems.
"""

from __future__ import annotations

from typing import Any


class AclError(Exception):
    """Base exception of the package.

    Attributes:
        detail: Human-readable error message.
        extra: Additional context about the error.
    """

    def __init__(self, detail: str, extra: dict[str, Any] | None = None) -> None:
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)


class AclConfigurationError(AclError):
    """Raised when an acl mapper cannot be created from its configuration.

    Example:
        raise AclConfigurationError(
            detail="Acl factory must not be None.",
            extra={"setting": "acl_factory"},
        )
    """
