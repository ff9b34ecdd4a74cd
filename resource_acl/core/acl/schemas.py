"""Transport representation of an access control list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resource_acl.core.acl.permission import Permission

__all__ = ["AccessControlEntry", "AccessControlList", "AclSchema"]


class AclSchema(BaseModel):
    """Base model for the immutable ACL transport values."""

    model_config = ConfigDict(
        # Transport values are snapshots
        frozen=True,
        # Allow creation from arbitrary objects with matching attributes
        from_attributes=True,
        populate_by_name=True,
        extra="ignore",
    )


class AccessControlEntry(AclSchema):
    """Grants of one permission.

    Example:
        >>> AccessControlEntry(permission="read", guest=True)
        AccessControlEntry(permission='read', guest=True, users=(), roles=(), groups=())
    """

    permission: str | None = Field(default=None, description="Permission name")
    guest: bool | None = Field(default=False, description="Open to any caller")
    users: tuple[str, ...] | None = Field(default=(), description="Granted users")
    roles: tuple[str, ...] | None = Field(default=(), description="Granted roles")
    groups: tuple[str, ...] | None = Field(default=(), description="Granted groups")


class AccessControlList(AclSchema):
    """Owner plus the entries of one resource.

    Entries produced by the DTO factory are sorted by permission. The
    entries and principal names are tuples, so a value cannot be changed
    in place.
    """

    owner: str | None = Field(default=None, description="Owner of the resource")
    entries: tuple[AccessControlEntry, ...] | None = Field(
        default=(), description="Access control entries"
    )

    def find_entry(self, permission: str | None) -> AccessControlEntry | None:
        """Return the entry of ``permission`` (case-insensitive), if any."""
        wanted = Permission.parse(permission)
        if wanted is None:
            return None
        for entry in self.entries or ():
            if Permission.parse(entry.permission) == wanted:
                return entry
        return None
