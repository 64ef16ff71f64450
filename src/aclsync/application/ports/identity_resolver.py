"""Identity resolver port - who is calling the platform."""

from typing import Protocol

from aclsync.domain.value_objects import PrincipalRef


class IdentityResolver(Protocol):
    """Port for looking up the acting principal."""

    async def current_principal(self) -> PrincipalRef: ...
