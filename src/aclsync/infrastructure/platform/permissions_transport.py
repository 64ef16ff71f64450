"""Permissions transport over the platform REST client."""

from pydantic import ValidationError as PydanticValidationError

from aclsync.domain.entities import AccessControlChange, ObjectACL
from aclsync.domain.exceptions import TransportError
from aclsync.infrastructure.platform.client import PlatformClient
from aclsync.infrastructure.platform.schemas import ChangeListModel, ObjectACLModel


class HttpPermissionsTransport:
    """GET/PUT/POST permissions payloads; paths come from the routing policy."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def get(self, path: str) -> ObjectACL:
        data = await self._client.get(path)
        try:
            model = ObjectACLModel.model_validate(data)
        except PydanticValidationError as e:
            raise TransportError(200, f"GET {path} returned an unexpected ACL: {e}") from e
        return model.to_domain()

    async def put(self, path: str, changes: list[AccessControlChange]) -> None:
        await self._client.put(path, ChangeListModel.from_domain(changes).to_payload())

    async def post(self, path: str, changes: list[AccessControlChange]) -> None:
        await self._client.post(path, ChangeListModel.from_domain(changes).to_payload())
