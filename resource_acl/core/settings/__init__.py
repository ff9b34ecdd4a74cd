"""Pydantic Settings v2 configuration.

Import settings via cached loaders:
    from resource_acl.core.settings import get_access_control_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .access_control import AccessControlSettings
from .loader import clear_all_caches, get_access_control_settings, get_logging_settings
from .logs import LoggingSettings

__all__ = [
    "AccessControlSettings",
    "LoggingSettings",
    "clear_all_caches",
    "get_access_control_settings",
    "get_logging_settings",
]
