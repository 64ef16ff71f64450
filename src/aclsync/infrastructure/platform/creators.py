"""Creator lookup for jobs and pipelines."""

from typing import Any

from aclsync.domain.exceptions import ResolutionError
from aclsync.domain.value_objects import PrincipalRef
from aclsync.infrastructure.platform.client import PlatformClient


def _creator(kind: str, object_id: str, info: dict[str, Any]) -> PrincipalRef:
    creator = info.get("creator_user_name")
    if not creator:
        raise ResolutionError(f"{kind} {object_id} has no recorded creator")
    return PrincipalRef.user(creator)


class PlatformCreatorLookup:
    """Reads ``creator_user_name`` from job and pipeline metadata."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def job_creator(self, job_id: str) -> PrincipalRef:
        info = await self._client.get("/jobs/get", params={"job_id": job_id})
        return _creator("job", job_id, info)

    async def pipeline_creator(self, pipeline_id: str) -> PrincipalRef:
        info = await self._client.get(f"/pipelines/{pipeline_id}")
        return _creator("pipeline", pipeline_id, info)
