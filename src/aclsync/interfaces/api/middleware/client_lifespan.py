"""Client lifespan middleware - closes the platform HTTP client on shutdown."""

from typing import Any

from aclsync.infrastructure.platform import PlatformClient


class ClientLifespanMiddleware:
    """Middleware that releases pooled platform connections when the ASGI server stops."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.aclose()
