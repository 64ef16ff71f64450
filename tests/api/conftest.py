"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from aclsync.application.use_cases.permissions import (
    CreatePermissionsUseCase,
    DeletePermissionsUseCase,
    ReadPermissionsUseCase,
    UpdatePermissionsUseCase,
    ValidatePermissionsUseCase,
)
from aclsync.interfaces.api.app import create_app
from aclsync.interfaces.api.resources.health import HealthResource
from aclsync.interfaces.api.resources.permissions import PermissionsResource


@pytest.fixture
def app(permissions_api, identity_resolver, path_resolver):
    """Falcon ASGI app wired to in-memory collaborators."""
    validate = ValidatePermissionsUseCase(identity_resolver)
    permissions_resource = PermissionsResource(
        create_permissions=CreatePermissionsUseCase(permissions_api, path_resolver, validate),
        read_permissions=ReadPermissionsUseCase(permissions_api, identity_resolver),
        update_permissions=UpdatePermissionsUseCase(permissions_api, validate),
        delete_permissions=DeletePermissionsUseCase(permissions_api),
        validate_permissions=validate,
    )
    return create_app(
        permissions_resource=permissions_resource,
        health_resource=HealthResource(identity_resolver),
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
