"""Access control mapping settings."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from resource_acl.core.acl.constants import ADMIN_ROLE_NAME, ALL_PERMISSIONS
from resource_acl.core.acl.permission import normalize_permissions


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class AccessControlSettings(BaseSettings):
    """Defaults and admin overlay of the acl mapper.

    Environment variables use ACL_ prefix; list values are comma-separated.
    Example: ACL_DEFAULT_PERMISSIONS=read,write ACL_ADMIN_ROLES=ROLE_ADMIN
    """

    default_permissions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(ALL_PERMISSIONS),
        description="Permissions every acl gets an entry for",
    )
    admin_roles: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [ADMIN_ROLE_NAME],
        description="Roles granted by the admin overlay",
    )
    switch_admin_access: bool = Field(
        default=True,
        description="Strip admin roles from transport values and grant them on entities",
    )
    return_null: bool = Field(
        default=False,
        description="Map None to None instead of to a default acl",
    )

    model_config = SettingsConfigDict(
        env_prefix="ACL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @field_validator("default_permissions", mode="before")
    @classmethod
    def _normalize_permissions(cls, value: Any) -> Any:
        """Parse comma-separated permissions and normalize them like the builder does."""
        value = _split_csv(value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [str(permission) for permission in normalize_permissions(value)]
        return value

    @field_validator("admin_roles", mode="before")
    @classmethod
    def _normalize_admin_roles(cls, value: Any) -> Any:
        """Parse comma-separated role names."""
        value = _split_csv(value)
        if isinstance(value, (list, tuple, set)):
            return list(dict.fromkeys(str(item).strip() for item in value if str(item).strip()))
        return value
