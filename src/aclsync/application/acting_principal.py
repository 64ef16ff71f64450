"""Acting principal memo scoped to a single operation."""

from aclsync.application.ports import IdentityResolver
from aclsync.domain.exceptions import AclSyncError, ResolutionError
from aclsync.domain.value_objects import PrincipalRef


class ActingPrincipal:
    """Resolves the calling principal at most once.

    Create one per operation; never share between operations, since the
    acting principal can differ between reconciliations in the same process.
    """

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        self._identity_resolver = identity_resolver
        self._principal: PrincipalRef | None = None

    async def get(self) -> PrincipalRef:
        if self._principal is None:
            try:
                self._principal = await self._identity_resolver.current_principal()
            except ResolutionError:
                raise
            except AclSyncError as e:
                raise ResolutionError(f"cannot resolve current principal: {e}") from e
        return self._principal
