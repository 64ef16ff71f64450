"""Domain value objects."""

from aclsync.domain.value_objects.object_reference import (
    PASSWORDS_REFERENCE,
    REGISTERED_MODELS_ROOT_REFERENCE,
    TOKENS_REFERENCE,
    build_reference,
    identifier_of,
)
from aclsync.domain.value_objects.permission_level import (
    ADMIN_GROUP,
    CAN_MANAGE,
    IS_OWNER,
)
from aclsync.domain.value_objects.principal import PrincipalKind, PrincipalRef

__all__ = [
    "ADMIN_GROUP",
    "CAN_MANAGE",
    "IS_OWNER",
    "PASSWORDS_REFERENCE",
    "REGISTERED_MODELS_ROOT_REFERENCE",
    "TOKENS_REFERENCE",
    "PrincipalKind",
    "PrincipalRef",
    "build_reference",
    "identifier_of",
]
