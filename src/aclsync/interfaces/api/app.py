"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from aclsync.interfaces.api.resources.health import HealthResource
from aclsync.interfaces.api.resources.object_types import ObjectTypesResource
from aclsync.interfaces.api.resources.permissions import PermissionsResource

logger = structlog.get_logger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.error("Unhandled error", method=req.method, path=req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    permissions_resource: PermissionsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/object-types", ObjectTypesResource())
    app.add_route("/v1/permissions", permissions_resource)
    app.add_route("/v1/permissions/validate", permissions_resource, suffix="validate")
    return app
