"""Object ACL - live permission state of one object."""

from dataclasses import dataclass, field

from aclsync.domain.entities.access_control import AccessControl


@dataclass
class ObjectACL:
    """Permissions of an object as read from the platform."""

    object_id: str
    object_type: str
    access_control_list: list[AccessControl] = field(default_factory=list)
