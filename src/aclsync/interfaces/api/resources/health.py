"""Health check endpoints."""

import falcon.asgi
import structlog

from aclsync.application.ports import IdentityResolver
from aclsync.domain.exceptions import AclSyncError

logger = structlog.get_logger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, identity_resolver: IdentityResolver | None = None) -> None:
        self._identity_resolver = identity_resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (platform reachable, token valid)."""
        if self._identity_resolver is not None:
            try:
                await self._identity_resolver.current_principal()
            except AclSyncError as e:
                logger.warning("Readiness check failed", error=str(e))
                resp.media = {"status": "unavailable", "error": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
