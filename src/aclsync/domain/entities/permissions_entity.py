"""Permissions entity - declarable view of an object ACL."""

from dataclasses import dataclass, field

from aclsync.domain.entities.access_control import AccessControlChange


@dataclass
class PermissionsEntity:
    """Object type, modifiable direct grants and identifier fields (field -> value)."""

    object_type: str
    access_control: list[AccessControlChange] = field(default_factory=list)
    identifiers: dict[str, str] = field(default_factory=dict)
