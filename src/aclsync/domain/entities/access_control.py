"""Access control entries - read form with provenance, write form without."""

from dataclasses import dataclass, field

from aclsync.domain.value_objects import PrincipalRef


@dataclass(frozen=True)
class Permission:
    """Permission level held by a principal, possibly inherited from a parent object."""

    permission_level: str
    inherited: bool = False
    inherited_from_object: tuple[str, ...] = ()

    def __str__(self) -> str:
        if self.inherited_from_object:
            return f"{self.permission_level} (from {list(self.inherited_from_object)})"
        return self.permission_level


@dataclass(frozen=True)
class AccessControlChange:
    """Direct grant of one permission level to a principal."""

    principal: PrincipalRef
    permission_level: str

    def __str__(self) -> str:
        return f"{self.principal} {self.permission_level}"


@dataclass
class AccessControl:
    """Everything the platform reports for one principal on an object.

    SQL assets do not nest permissions and report a flat ``permission_level``.
    """

    principal: PrincipalRef
    all_permissions: list[Permission] = field(default_factory=list)
    permission_level: str | None = None
