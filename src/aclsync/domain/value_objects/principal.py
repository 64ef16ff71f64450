"""Principal reference - exactly one of user, group or service principal."""

from dataclasses import dataclass
from enum import StrEnum

from aclsync.domain.exceptions import ValidationError


class PrincipalKind(StrEnum):
    """Kind of principal, named after its wire field."""

    USER = "user_name"
    GROUP = "group_name"
    SERVICE_PRINCIPAL = "service_principal_name"


@dataclass(frozen=True)
class PrincipalRef:
    """Who a permission is granted to."""

    kind: PrincipalKind
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError(f"{self.kind.value} must not be empty")

    @classmethod
    def user(cls, name: str) -> "PrincipalRef":
        return cls(PrincipalKind.USER, name)

    @classmethod
    def group(cls, name: str) -> "PrincipalRef":
        return cls(PrincipalKind.GROUP, name)

    @classmethod
    def service_principal(cls, name: str) -> "PrincipalRef":
        return cls(PrincipalKind.SERVICE_PRINCIPAL, name)

    @classmethod
    def from_fields(
        cls,
        user_name: str | None = None,
        group_name: str | None = None,
        service_principal_name: str | None = None,
    ) -> "PrincipalRef":
        """Build from the three optional wire fields; exactly one must be non-empty."""
        populated = [
            (kind, value)
            for kind, value in (
                (PrincipalKind.USER, user_name),
                (PrincipalKind.GROUP, group_name),
                (PrincipalKind.SERVICE_PRINCIPAL, service_principal_name),
            )
            if value
        ]
        if len(populated) != 1:
            raise ValidationError(
                "exactly one of user_name, group_name, service_principal_name must be set"
            )
        kind, value = populated[0]
        return cls(kind, value)

    def to_fields(self) -> dict[str, str]:
        """Wire representation: ``{"user_name": "bob"}`` and so on."""
        return {self.kind.value: self.name}

    @property
    def is_group(self) -> bool:
        return self.kind is PrincipalKind.GROUP

    def __str__(self) -> str:
        return f"{self.kind.value}={self.name}"
