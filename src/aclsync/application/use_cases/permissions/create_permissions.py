"""Create permissions use case."""

import structlog

from aclsync.application.object_types import mapping_for_identifiers, resolve_identifier
from aclsync.application.permissions_api import PermissionsAPI
from aclsync.application.ports import PathResolver
from aclsync.application.use_cases.permissions.validate_permissions import (
    ValidatePermissionsUseCase,
)
from aclsync.domain.entities import AccessControlChange
from aclsync.domain.value_objects import build_reference

logger = structlog.get_logger(__name__)


class CreatePermissionsUseCase:
    """Declare permissions for an object identified by exactly one registry field."""

    def __init__(
        self,
        permissions_api: PermissionsAPI,
        path_resolver: PathResolver,
        validate_permissions: ValidatePermissionsUseCase,
    ) -> None:
        self._permissions = permissions_api
        self._path_resolver = path_resolver
        self._validate = validate_permissions

    async def execute(
        self,
        identifiers: dict[str, str],
        changes: list[AccessControlChange],
    ) -> str:
        """Apply declared permissions and return the object reference."""
        mapping = mapping_for_identifiers(identifiers)
        acting = self._permissions.acting_principal()
        await self._validate.execute(mapping, changes, acting)
        object_id = await resolve_identifier(
            mapping, identifiers[mapping.field], self._path_resolver
        )
        reference = build_reference(mapping.resource_type, object_id)
        await self._permissions.update(reference, changes, acting)
        logger.info("Permissions created", object_id=reference, field=mapping.field)
        return reference
