"""resource-acl - access control lists for individual resources.

Build, merge and evaluate per-resource access control lists, and map them
between their transport and entity representations:

    from resource_acl import AccessController, AclBuilder
"""

from __future__ import annotations

from resource_acl.core.acl import (
    AccessControlEntry,
    AccessControlList,
    AccessController,
    Ace,
    Acl,
    AclBuilder,
    AclFactory,
    AclImpl,
    AclMapper,
    AclMapperImpl,
    Permission,
    StandardPermission,
    create_acl_mapper,
    dto_factory,
    entity_factory,
)
from resource_acl.core.exceptions import AclConfigurationError, AclError

__version__ = "0.1.0"

__all__ = [
    "AccessControlEntry",
    "AccessControlList",
    "AccessController",
    "Ace",
    "Acl",
    "AclBuilder",
    "AclConfigurationError",
    "AclError",
    "AclFactory",
    "AclImpl",
    "AclMapper",
    "AclMapperImpl",
    "Permission",
    "StandardPermission",
    "__version__",
    "create_acl_mapper",
    "dto_factory",
    "entity_factory",
]
