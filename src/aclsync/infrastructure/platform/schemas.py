"""Wire models for permissions payloads."""

import structlog
from pydantic import BaseModel, ConfigDict

from aclsync.domain.entities import (
    AccessControl,
    AccessControlChange,
    ObjectACL,
    Permission,
)
from aclsync.domain.exceptions import ValidationError
from aclsync.domain.value_objects import PrincipalRef

logger = structlog.get_logger(__name__)


class PermissionModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    permission_level: str
    inherited: bool = False
    inherited_from_object: list[str] | None = None

    def to_domain(self) -> Permission:
        return Permission(
            permission_level=self.permission_level,
            inherited=self.inherited,
            inherited_from_object=tuple(self.inherited_from_object or ()),
        )


class AccessControlModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_name: str | None = None
    group_name: str | None = None
    service_principal_name: str | None = None
    all_permissions: list[PermissionModel] | None = None
    permission_level: str | None = None

    def to_domain(self) -> AccessControl:
        principal = PrincipalRef.from_fields(
            user_name=self.user_name,
            group_name=self.group_name,
            service_principal_name=self.service_principal_name,
        )
        return AccessControl(
            principal=principal,
            all_permissions=[p.to_domain() for p in self.all_permissions or []],
            permission_level=self.permission_level or None,
        )


class ObjectACLModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object_id: str = ""
    object_type: str = ""
    access_control_list: list[AccessControlModel] | None = None

    def to_domain(self) -> ObjectACL:
        """Domain ACL; entries without exactly one principal are dropped."""
        entries: list[AccessControl] = []
        for item in self.access_control_list or []:
            try:
                entries.append(item.to_domain())
            except ValidationError as e:
                logger.warning(
                    "Skipping access control entry",
                    object_id=self.object_id,
                    reason=str(e),
                )
        return ObjectACL(
            object_id=self.object_id,
            object_type=self.object_type,
            access_control_list=entries,
        )


class AccessControlChangeModel(BaseModel):
    user_name: str | None = None
    group_name: str | None = None
    service_principal_name: str | None = None
    permission_level: str

    @classmethod
    def from_domain(cls, change: AccessControlChange) -> "AccessControlChangeModel":
        return cls(permission_level=change.permission_level, **change.principal.to_fields())


class ChangeListModel(BaseModel):
    access_control_list: list[AccessControlChangeModel]

    @classmethod
    def from_domain(cls, changes: list[AccessControlChange]) -> "ChangeListModel":
        return cls(access_control_list=[AccessControlChangeModel.from_domain(c) for c in changes])

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
