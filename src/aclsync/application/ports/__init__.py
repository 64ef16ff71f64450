"""Application ports - interfaces for external adapters."""

from aclsync.application.ports.creator_lookup import CreatorLookup
from aclsync.application.ports.identity_resolver import IdentityResolver
from aclsync.application.ports.path_resolver import PathResolver
from aclsync.application.ports.permissions_transport import PermissionsTransport

__all__ = [
    "CreatorLookup",
    "IdentityResolver",
    "PathResolver",
    "PermissionsTransport",
]
