"""Validate permissions use case - plan-time checks before any write."""

from aclsync.application.acting_principal import ActingPrincipal
from aclsync.application.object_types import TypeMapping, check_permission_level
from aclsync.application.ports import IdentityResolver
from aclsync.domain.entities import AccessControlChange
from aclsync.domain.exceptions import ValidationError
from aclsync.domain.value_objects import ADMIN_GROUP


class ValidatePermissionsUseCase:
    """Reject declarations the platform or the safety rules would not honour."""

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        self._identity_resolver = identity_resolver

    async def execute(
        self,
        mapping: TypeMapping,
        changes: list[AccessControlChange],
        acting: ActingPrincipal | None = None,
    ) -> None:
        """Raise ValidationError on the first unacceptable change."""
        if not changes:
            raise ValidationError("at least one access_control entry is required")
        for change in changes:
            if change.principal.is_group and change.principal.name.lower() == ADMIN_GROUP:
                raise ValidationError(
                    f"It is not possible to restrict any permissions from `{ADMIN_GROUP}`."
                )
        acting = acting or ActingPrincipal(self._identity_resolver)
        me = await acting.get()
        for change in changes:
            check_permission_level(mapping, change.permission_level)
            if change.principal == me:
                raise ValidationError(
                    "it is not possible to decrease administrative permissions "
                    f"for the current user: {me.name}"
                )
