"""Domain entities."""

from aclsync.domain.entities.access_control import (
    AccessControl,
    AccessControlChange,
    Permission,
)
from aclsync.domain.entities.object_acl import ObjectACL
from aclsync.domain.entities.permissions_entity import PermissionsEntity

__all__ = [
    "AccessControl",
    "AccessControlChange",
    "ObjectACL",
    "Permission",
    "PermissionsEntity",
]
