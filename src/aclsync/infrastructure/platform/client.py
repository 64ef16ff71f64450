"""Platform REST client over httpx."""

from typing import Any

import httpx
import structlog

from aclsync.domain.exceptions import TransportError

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/2.0"


def _api_error(response: httpx.Response) -> TransportError:
    """Map an error response (``{"error_code", "message"}``) to TransportError."""
    error_code = None
    message = response.reason_phrase or f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error_code = body.get("error_code")
        message = body.get("message") or message
    return TransportError(response.status_code, message, error_code)


class PlatformClient:
    """Authenticated JSON calls against ``<host>/api/2.0``."""

    def __init__(
        self,
        host: str = "",
        token: str = "",
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=f"{host.rstrip('/')}{API_PREFIX}",
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
        )

    async def get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        return await self._request("GET", path, params=params)

    async def put(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", path, json=body)

    async def post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", path, json=body)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(0, f"{method} {path} failed: {e}") from e
        if response.is_error:
            error = _api_error(response)
            logger.debug(
                "Platform API error",
                method=method,
                path=path,
                status_code=error.status_code,
                error_code=error.error_code,
            )
            raise error
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                response.status_code, f"{method} {path} returned a non-JSON body"
            ) from e
        if not isinstance(body, dict):
            raise TransportError(
                response.status_code, f"{method} {path} returned a non-object body"
            )
        return body
