"""Pytest fixtures for aclsync tests."""

from __future__ import annotations

import pytest

from aclsync.application.permissions_api import PermissionsAPI
from aclsync.domain.entities import (
    AccessControl,
    AccessControlChange,
    ObjectACL,
    Permission,
)
from aclsync.domain.exceptions import ResolutionError, TransportError
from aclsync.domain.value_objects import PrincipalRef


# --- Fake collaborators ---


class FakeTransport:
    """In-memory permissions transport keyed by URL path; records every write."""

    def __init__(self) -> None:
        self.acls: dict[str, ObjectACL] = {}
        self.read_errors: dict[str, TransportError] = {}
        self.write_error: TransportError | None = None
        self.writes: list[tuple[str, str, list[AccessControlChange]]] = []

    async def get(self, path: str) -> ObjectACL:
        if path in self.read_errors:
            raise self.read_errors[path]
        if path not in self.acls:
            raise TransportError(404, f"{path} does not exist", "RESOURCE_DOES_NOT_EXIST")
        return self.acls[path]

    async def put(self, path: str, changes: list[AccessControlChange]) -> None:
        self._write("PUT", path, changes)

    async def post(self, path: str, changes: list[AccessControlChange]) -> None:
        self._write("POST", path, changes)

    def _write(self, method: str, path: str, changes: list[AccessControlChange]) -> None:
        if self.write_error:
            raise self.write_error
        self.writes.append((method, path, list(changes)))

    @property
    def last_write(self) -> tuple[str, str, list[AccessControlChange]]:
        return self.writes[-1]


class FakeIdentityResolver:
    """Returns a fixed acting principal and counts lookups."""

    def __init__(self, principal: PrincipalRef | None = None) -> None:
        self.principal = principal or PrincipalRef.user("alice")
        self.error: Exception | None = None
        self.calls = 0

    async def current_principal(self) -> PrincipalRef:
        self.calls += 1
        if self.error:
            raise self.error
        return self.principal


class FakePathResolver:
    """Workspace paths mapped to numeric object ids."""

    def __init__(self) -> None:
        self.paths: dict[str, int] = {}

    async def resolve_object_id(self, path: str) -> int:
        if path not in self.paths:
            raise TransportError(404, f"Path ({path}) doesn't exist.", "RESOURCE_DOES_NOT_EXIST")
        return self.paths[path]


class FakeCreatorLookup:
    """Recorded creators of jobs and pipelines."""

    def __init__(self) -> None:
        self.jobs: dict[str, PrincipalRef] = {}
        self.pipelines: dict[str, PrincipalRef] = {}

    async def job_creator(self, job_id: str) -> PrincipalRef:
        if job_id not in self.jobs:
            raise ResolutionError(f"job {job_id} has no recorded creator")
        return self.jobs[job_id]

    async def pipeline_creator(self, pipeline_id: str) -> PrincipalRef:
        if pipeline_id not in self.pipelines:
            raise TransportError(404, f"pipeline {pipeline_id} not found")
        return self.pipelines[pipeline_id]


# --- Builders ---


def direct(principal: PrincipalRef, level: str) -> AccessControl:
    """Read entry with one direct permission."""
    return AccessControl(principal=principal, all_permissions=[Permission(level)])


def inherited(principal: PrincipalRef, level: str, source: str = "/directories/1") -> AccessControl:
    """Read entry holding an inherited permission only."""
    return AccessControl(
        principal=principal,
        all_permissions=[Permission(level, inherited=True, inherited_from_object=(source,))],
    )


def change(principal: PrincipalRef, level: str) -> AccessControlChange:
    return AccessControlChange(principal, level)


# --- Fixtures ---


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def identity_resolver() -> FakeIdentityResolver:
    return FakeIdentityResolver()


@pytest.fixture
def path_resolver() -> FakePathResolver:
    return FakePathResolver()


@pytest.fixture
def creator_lookup() -> FakeCreatorLookup:
    return FakeCreatorLookup()


@pytest.fixture
def permissions_api(transport, identity_resolver, creator_lookup) -> PermissionsAPI:
    """Orchestrator wired to in-memory collaborators."""
    return PermissionsAPI(
        transport=transport,
        identity_resolver=identity_resolver,
        creator_lookup=creator_lookup,
    )
