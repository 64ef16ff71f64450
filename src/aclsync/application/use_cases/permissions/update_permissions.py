"""Update permissions use case."""

from aclsync.application.object_types import mapping_for_reference
from aclsync.application.permissions_api import PermissionsAPI
from aclsync.application.use_cases.permissions.validate_permissions import (
    ValidatePermissionsUseCase,
)
from aclsync.domain.entities import AccessControlChange


class UpdatePermissionsUseCase:
    """Replace the declared permissions of an existing reference."""

    def __init__(
        self,
        permissions_api: PermissionsAPI,
        validate_permissions: ValidatePermissionsUseCase,
    ) -> None:
        self._permissions = permissions_api
        self._validate = validate_permissions

    async def execute(self, reference: str, changes: list[AccessControlChange]) -> None:
        acting = self._permissions.acting_principal()
        await self._validate.execute(mapping_for_reference(reference), changes, acting)
        await self._permissions.update(reference, changes, acting)
