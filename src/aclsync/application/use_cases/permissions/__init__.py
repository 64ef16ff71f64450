"""Permissions resource lifecycle use cases."""

from aclsync.application.use_cases.permissions.create_permissions import (
    CreatePermissionsUseCase,
)
from aclsync.application.use_cases.permissions.delete_permissions import (
    DeletePermissionsUseCase,
)
from aclsync.application.use_cases.permissions.read_permissions import (
    ReadPermissionsUseCase,
)
from aclsync.application.use_cases.permissions.update_permissions import (
    UpdatePermissionsUseCase,
)
from aclsync.application.use_cases.permissions.validate_permissions import (
    ValidatePermissionsUseCase,
)

__all__ = [
    "CreatePermissionsUseCase",
    "DeletePermissionsUseCase",
    "ReadPermissionsUseCase",
    "UpdatePermissionsUseCase",
    "ValidatePermissionsUseCase",
]
