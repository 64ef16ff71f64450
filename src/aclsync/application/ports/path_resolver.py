"""Path resolver port - workspace path to object id."""

from typing import Protocol


class PathResolver(Protocol):
    """Port for resolving notebook, directory and repo paths."""

    async def resolve_object_id(self, path: str) -> int: ...
