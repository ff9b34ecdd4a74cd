"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolated environment and cache handling
    - ACL Fixtures: transport values and entities used across test modules
"""

from __future__ import annotations

import os

import pytest

from resource_acl.core.acl import AccessControlEntry, AccessControlList, Ace, AclImpl
from resource_acl.core.settings import clear_all_caches

# Keep local .env files and shell exports from leaking into tests
for _name in list(os.environ):
    if _name.startswith(("ACL_", "LOG_")):
        os.environ.pop(_name)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _clear_settings_caches():
    """Reload settings for every test."""
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# ACL Fixtures
# ============================================================================


@pytest.fixture
def access_control_list() -> AccessControlList:
    """Transport value with a private write entry and a public read entry.

    Returns:
        AccessControlList owned by "owner".
    """
    return AccessControlList(
        owner="owner",
        entries=[
            AccessControlEntry(
                permission="write",
                users=["user"],
                roles=["role"],
                groups=["group"],
            ),
            AccessControlEntry(
                permission="read",
                guest=True,
            ),
        ],
    )


@pytest.fixture
def acl_entity() -> AclImpl:
    """Entity equivalent of the ``access_control_list`` fixture.

    Returns:
        AclImpl owned by "owner".
    """
    return AclImpl(
        "owner",
        {
            "read": Ace(guest=True),
            "write": Ace(users={"user"}, roles={"role"}, groups={"group"}),
        },
    )
