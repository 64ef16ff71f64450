"""Workspace path to object id lookup."""

from aclsync.domain.exceptions import ResolutionError
from aclsync.infrastructure.platform.client import PlatformClient


class WorkspacePathResolver:
    """Resolve notebook, directory and repo paths via ``/workspace/get-status``."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def resolve_object_id(self, path: str) -> int:
        status = await self._client.get("/workspace/get-status", params={"path": path})
        object_id = status.get("object_id")
        if object_id is None:
            raise ResolutionError(f"no object_id for {path}")
        return int(object_id)
