"""Current principal from the SCIM ``Me`` endpoint."""

from aclsync.domain.exceptions import ResolutionError
from aclsync.domain.value_objects import PrincipalRef
from aclsync.infrastructure.platform.client import PlatformClient


class ScimIdentityResolver:
    """Acting principal as reported by ``/preview/scim/v2/Me``."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def current_principal(self) -> PrincipalRef:
        me = await self._client.get("/preview/scim/v2/Me")
        user_name = me.get("userName")
        if not user_name:
            raise ResolutionError("current user has no userName")
        return PrincipalRef.user(user_name)
