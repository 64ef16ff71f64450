"""Permissions transport port - raw permissions REST calls."""

from typing import Protocol

from aclsync.domain.entities import AccessControlChange, ObjectACL


class PermissionsTransport(Protocol):
    """Port for reading and writing object ACLs.

    Failures raise ``TransportError`` carrying the HTTP status code.
    """

    async def get(self, path: str) -> ObjectACL: ...

    async def put(self, path: str, changes: list[AccessControlChange]) -> None: ...

    async def post(self, path: str, changes: list[AccessControlChange]) -> None: ...
