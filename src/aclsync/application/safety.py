"""Safety invariants applied to every outgoing change list.

Writes must never lock the acting principal or the ``admins`` group out of an
object, and jobs/pipelines must always keep an owner.
"""

import structlog

from aclsync.application.acting_principal import ActingPrincipal
from aclsync.application.normalization import to_direct_change
from aclsync.application.ports import CreatorLookup
from aclsync.application.routing import requires_self_grant
from aclsync.domain.entities import AccessControlChange, ObjectACL
from aclsync.domain.exceptions import AclSyncError, ResolutionError
from aclsync.domain.value_objects import (
    ADMIN_GROUP,
    CAN_MANAGE,
    IS_OWNER,
    PASSWORDS_REFERENCE,
    REGISTERED_MODELS_ROOT_REFERENCE,
    TOKENS_REFERENCE,
    PrincipalRef,
)
from aclsync.domain.value_objects.object_reference import (
    JOBS_PREFIX,
    PIPELINES_PREFIX,
    is_job,
    is_pipeline,
)

logger = structlog.get_logger(__name__)

# Platform rejects writes that would implicitly drop admins on these singletons.
_ADMIN_PROTECTED_REFERENCES = frozenset({TOKENS_REFERENCE, REGISTERED_MODELS_ROOT_REFERENCE})


def _admin_manage() -> AccessControlChange:
    return AccessControlChange(PrincipalRef.group(ADMIN_GROUP), CAN_MANAGE)


class SafetyInvariants:
    """Mutates or builds change lists right before dispatch."""

    def __init__(self, creator_lookup: CreatorLookup) -> None:
        self._creator_lookup = creator_lookup

    async def protect_update(
        self,
        reference: str,
        changes: list[AccessControlChange],
        acting: ActingPrincipal,
    ) -> list[AccessControlChange]:
        """Admin and owner rules for an update; returns a new list."""
        payload = list(changes)
        if reference in _ADMIN_PROTECTED_REFERENCES:
            payload.append(_admin_manage())
        if is_job(reference) or is_pipeline(reference):
            if not any(c.permission_level == IS_OWNER for c in payload):
                me = await acting.get()
                logger.debug("Adding missing owner", object_id=reference, owner=str(me))
                payload.append(AccessControlChange(me, IS_OWNER))
        return payload

    async def grant_self_manage(
        self,
        reference: str,
        changes: list[AccessControlChange],
        acting: ActingPrincipal,
    ) -> list[AccessControlChange]:
        """Append CAN_MANAGE for the acting principal where the object needs it.

        Appended unconditionally, even when an equal entry is already present.
        """
        if not requires_self_grant(reference):
            return list(changes)
        me = await acting.get()
        return [*changes, AccessControlChange(me, CAN_MANAGE)]

    async def baseline_for_delete(
        self, reference: str, acl: ObjectACL
    ) -> list[AccessControlChange]:
        """Minimal safe ACL: direct admin grants plus the recorded creator as owner."""
        baseline: list[AccessControlChange] = []
        if reference != PASSWORDS_REFERENCE:
            for entry in acl.access_control_list:
                if entry.principal != PrincipalRef.group(ADMIN_GROUP):
                    continue
                change = to_direct_change(entry)
                if change is not None:
                    baseline.append(change)
        if is_job(reference):
            creator = await self._creator(
                self._creator_lookup.job_creator, reference.removeprefix(JOBS_PREFIX)
            )
            baseline.append(AccessControlChange(creator, IS_OWNER))
        elif is_pipeline(reference):
            creator = await self._creator(
                self._creator_lookup.pipeline_creator,
                reference.removeprefix(PIPELINES_PREFIX),
            )
            baseline.append(AccessControlChange(creator, IS_OWNER))
        return baseline

    async def _creator(self, lookup, object_id: str) -> PrincipalRef:
        try:
            return await lookup(object_id)
        except ResolutionError:
            raise
        except AclSyncError as e:
            raise ResolutionError(f"cannot resolve creator of {object_id}: {e}") from e
