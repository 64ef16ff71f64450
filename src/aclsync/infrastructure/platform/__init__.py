"""Platform REST adapters."""

from aclsync.infrastructure.platform.client import PlatformClient
from aclsync.infrastructure.platform.creators import PlatformCreatorLookup
from aclsync.infrastructure.platform.permissions_transport import HttpPermissionsTransport
from aclsync.infrastructure.platform.scim_identity import ScimIdentityResolver
from aclsync.infrastructure.platform.workspace_paths import WorkspacePathResolver

__all__ = [
    "HttpPermissionsTransport",
    "PlatformClient",
    "PlatformCreatorLookup",
    "ScimIdentityResolver",
    "WorkspacePathResolver",
]
