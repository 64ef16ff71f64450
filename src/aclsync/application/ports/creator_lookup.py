"""Creator lookup port - recorded creators of jobs and pipelines."""

from typing import Protocol

from aclsync.domain.value_objects import PrincipalRef


class CreatorLookup(Protocol):
    """Port for recovering the creator of ownership-bearing objects."""

    async def job_creator(self, job_id: str) -> PrincipalRef: ...

    async def pipeline_creator(self, pipeline_id: str) -> PrincipalRef: ...
