"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the
process.

Testing:
    In tests, clear the caches to force a reload:
    clear_all_caches()

    Or construct settings directly:
    settings = AccessControlSettings(switch_admin_access=False)
"""

from __future__ import annotations

from functools import lru_cache

from .access_control import AccessControlSettings
from .logs import LoggingSettings


@lru_cache(maxsize=1)
def get_access_control_settings() -> AccessControlSettings:
    """Get cached access control settings.

    Returns:
        Validated and frozen AccessControlSettings instance.
    """
    return AccessControlSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear all settings caches (useful for testing)."""
    get_access_control_settings.cache_clear()
    get_logging_settings.cache_clear()
