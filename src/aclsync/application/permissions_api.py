"""Reconciliation orchestrator - read, update and delete object permissions."""

from enum import StrEnum

import structlog

from aclsync.application.acting_principal import ActingPrincipal
from aclsync.application.ports import CreatorLookup, IdentityResolver, PermissionsTransport
from aclsync.application.routing import WriteMethod, route_for, url_path_for
from aclsync.application.safety import SafetyInvariants
from aclsync.domain.entities import AccessControlChange, ObjectACL
from aclsync.domain.exceptions import NotFound, TransportError

logger = structlog.get_logger(__name__)

# Auto-purged clusters surface through the permissions API as a 400.
_PURGED_CLUSTER_MESSAGE = "Cannot access cluster"


class ReadFailure(StrEnum):
    """Outcome class of a failed permissions read."""

    NOT_FOUND = "not_found"
    FATAL = "fatal"


def classify_read_failure(error: TransportError) -> ReadFailure:
    """Decide whether a read error means the object is gone."""
    if error.status_code == 404:
        return ReadFailure.NOT_FOUND
    if error.status_code == 400 and _PURGED_CLUSTER_MESSAGE in error.message:
        return ReadFailure.NOT_FOUND
    return ReadFailure.FATAL


class PermissionsAPI:
    """Public Read/Update/Delete contract over the permissions transport."""

    def __init__(
        self,
        transport: PermissionsTransport,
        identity_resolver: IdentityResolver,
        creator_lookup: CreatorLookup,
    ) -> None:
        self._transport = transport
        self._identity_resolver = identity_resolver
        self._safety = SafetyInvariants(creator_lookup)

    async def read(self, reference: str) -> ObjectACL | None:
        """All permissions of the object, inherited ones included; None when absent."""
        try:
            return await self._transport.get(url_path_for(reference))
        except TransportError as e:
            if classify_read_failure(e) is ReadFailure.NOT_FOUND:
                logger.info(
                    "Permissions not found",
                    object_id=reference,
                    status_code=e.status_code,
                )
                return None
            raise

    def acting_principal(self) -> ActingPrincipal:
        """Fresh acting-principal memo for one operation."""
        return ActingPrincipal(self._identity_resolver)

    async def update(
        self,
        reference: str,
        changes: list[AccessControlChange],
        acting: ActingPrincipal | None = None,
    ) -> None:
        """Replace (or, for SQL assets, extend) the object's direct grants."""
        acting = acting or self.acting_principal()
        payload = await self._safety.protect_update(reference, changes, acting)
        await self._dispatch(reference, payload, acting)

    async def delete(self, reference: str) -> None:
        """Reset the object to its safe baseline ACL."""
        acl = await self.read(reference)
        if acl is None:
            raise NotFound(f"permissions for {reference} not found")
        payload = await self._safety.baseline_for_delete(reference, acl)
        await self._dispatch(reference, payload, self.acting_principal())

    async def _dispatch(
        self,
        reference: str,
        changes: list[AccessControlChange],
        acting: ActingPrincipal,
    ) -> None:
        payload = await self._safety.grant_self_manage(reference, changes, acting)
        route = route_for(reference)
        if route.method is WriteMethod.POST:
            await self._transport.post(route.path, payload)
        else:
            await self._transport.put(route.path, payload)
        logger.info(
            "Permissions written",
            object_id=reference,
            method=route.method.value,
            path=route.path,
            entries=len(payload),
        )
