"""Delete permissions use case."""

from aclsync.application.permissions_api import PermissionsAPI


class DeletePermissionsUseCase:
    """Drop declared permissions, leaving the object's safe baseline."""

    def __init__(self, permissions_api: PermissionsAPI) -> None:
        self._permissions = permissions_api

    async def execute(self, reference: str) -> None:
        await self._permissions.delete(reference)
