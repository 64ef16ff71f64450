"""Read permissions use case."""

from aclsync.application.acting_principal import ActingPrincipal
from aclsync.application.normalization import to_entity
from aclsync.application.permissions_api import PermissionsAPI
from aclsync.application.ports import IdentityResolver
from aclsync.domain.entities import PermissionsEntity


class ReadPermissionsUseCase:
    """Read an object's ACL as declarable state."""

    def __init__(
        self,
        permissions_api: PermissionsAPI,
        identity_resolver: IdentityResolver,
    ) -> None:
        self._permissions = permissions_api
        self._identity_resolver = identity_resolver

    async def execute(
        self,
        reference: str,
        declared_identifiers: dict[str, str] | None = None,
    ) -> PermissionsEntity | None:
        """Entity for the object, or None when it has no modifiable permissions."""
        acl = await self._permissions.read(reference)
        if acl is None:
            return None
        me = await ActingPrincipal(self._identity_resolver).get()
        entity = to_entity(acl, declared_identifiers or {}, me, reference=reference)
        if not entity.access_control:
            # nothing declarable left is the same as absence
            return None
        return entity
