"""Application entry point and composition root."""

from aclsync import __version__
from aclsync.application.permissions_api import PermissionsAPI
from aclsync.application.use_cases.permissions import (
    CreatePermissionsUseCase,
    DeletePermissionsUseCase,
    ReadPermissionsUseCase,
    UpdatePermissionsUseCase,
    ValidatePermissionsUseCase,
)
from aclsync.config import get_settings
from aclsync.infrastructure.platform import (
    HttpPermissionsTransport,
    PlatformClient,
    PlatformCreatorLookup,
    ScimIdentityResolver,
    WorkspacePathResolver,
)
from aclsync.interfaces.api.app import create_app
from aclsync.interfaces.api.middleware.client_lifespan import ClientLifespanMiddleware
from aclsync.interfaces.api.resources.health import HealthResource
from aclsync.interfaces.api.resources.permissions import PermissionsResource
from aclsync.logging_config import setup_logging


def main() -> None:
    """CLI entry point."""
    print(f"aclsync v{__version__}")


def create_aclsync_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logging(settings)
    client = PlatformClient(
        host=settings.platform_host,
        token=settings.platform_token,
        timeout=settings.http_timeout_seconds,
    )

    identity_resolver = ScimIdentityResolver(client)
    path_resolver = WorkspacePathResolver(client)
    permissions_api = PermissionsAPI(
        transport=HttpPermissionsTransport(client),
        identity_resolver=identity_resolver,
        creator_lookup=PlatformCreatorLookup(client),
    )

    validate_permissions = ValidatePermissionsUseCase(identity_resolver)
    permissions_resource = PermissionsResource(
        create_permissions=CreatePermissionsUseCase(
            permissions_api, path_resolver, validate_permissions
        ),
        read_permissions=ReadPermissionsUseCase(permissions_api, identity_resolver),
        update_permissions=UpdatePermissionsUseCase(permissions_api, validate_permissions),
        delete_permissions=DeletePermissionsUseCase(permissions_api),
        validate_permissions=validate_permissions,
    )

    return create_app(
        permissions_resource=permissions_resource,
        health_resource=HealthResource(identity_resolver),
        middleware=[ClientLifespanMiddleware(client)],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_aclsync_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
