"""Per-resource access control lists.

An access control list (ACL) consists of an owner and, per permission, an
access control entry (ACE) naming the users, roles and groups holding that
permission or opening it to guests.

Components:
    Model:
        - Permission: Lower-case permission value type
        - Ace: Grants of one permission
        - Acl / AclImpl: Entity shape and its in-memory implementation
        - AccessControlList / AccessControlEntry: Immutable transport values

    Construction:
        - AclBuilder: Creates, merges and changes ACL state
        - AclFactory: Materializes builder state (dto_factory, entity_factory)

    Evaluation:
        - AccessController: Answers permission queries

    Mapping:
        - AclMapperImpl: Transport <-> entity mapping with default
          permissions and the admin role overlay

Evaluation order of AccessController.has_permission:
    1. No acl, or a blank permission: denied
    2. The user is the owner: granted
    3. No entry for the permission: denied
    4. Guest entry, granted user, role or group: granted

Example:
    >>> from resource_acl.core.acl import AccessController, AclBuilder
    >>>
    >>> acl = (
    ...     AclBuilder()
    ...     .owner("alice")
    ...     .defaults("read", "write")
    ...     .add_user("bob", "read")
    ...     .guest(True, "read")
    ...     .build_acl()
    ... )
    >>> controller = AccessController(acl)
    >>> controller.has_permission("alice", [], [], "write")  # owner
    True
    >>> controller.has_permission("carol", [], [], "read")  # guest
    True
    >>> controller.has_permission("carol", [], [], "write")
    False
"""

from __future__ import annotations

from resource_acl.core.acl.ace import Ace
from resource_acl.core.acl.acl import Acl, AclImpl
from resource_acl.core.acl.builder import AclBuilder, builder
from resource_acl.core.acl.constants import (
    ADMIN_ROLE_NAME,
    ADMINISTRATION,
    ALL_PERMISSIONS,
    CREATE,
    DELETE,
    READ,
    WRITE,
    StandardPermission,
)
from resource_acl.core.acl.controller import AccessController
from resource_acl.core.acl.factory import (
    AclFactory,
    DtoAclFactory,
    EntityAclFactory,
    dto_factory,
    entity_factory,
    factory_of,
)
from resource_acl.core.acl.mapper import AclMapper, AclMapperImpl, create_acl_mapper
from resource_acl.core.acl.permission import Permission
from resource_acl.core.acl.schemas import AccessControlEntry, AccessControlList

__all__ = [
    "ADMINISTRATION",
    "ADMIN_ROLE_NAME",
    "ALL_PERMISSIONS",
    "CREATE",
    "DELETE",
    "READ",
    "WRITE",
    "AccessControlEntry",
    "AccessControlList",
    "AccessController",
    "Ace",
    "Acl",
    "AclBuilder",
    "AclFactory",
    "AclImpl",
    "AclMapper",
    "AclMapperImpl",
    "DtoAclFactory",
    "EntityAclFactory",
    "Permission",
    "StandardPermission",
    "builder",
    "create_acl_mapper",
    "dto_factory",
    "entity_factory",
    "factory_of",
]
