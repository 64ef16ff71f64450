"""Registry: identifier field -> object type, resource segment and allowed levels."""

from dataclasses import dataclass
from enum import StrEnum

from aclsync.application.ports import PathResolver
from aclsync.domain.exceptions import (
    AclSyncError,
    ResolutionError,
    UnknownObjectType,
    ValidationError,
)


class IdResolution(StrEnum):
    """How a declared identifier becomes the platform object id."""

    DIRECT = "direct"
    PATH = "path"


@dataclass(frozen=True)
class TypeMapping:
    """One row of the registry."""

    field: str
    object_type: str
    resource_type: str
    allowed_permission_levels: frozenset[str]
    resolution: IdResolution = IdResolution.DIRECT

    @property
    def reference_prefix(self) -> str:
        return f"/{self.resource_type}/"


_WORKSPACE_LEVELS = frozenset({"CAN_READ", "CAN_RUN", "CAN_EDIT", "CAN_MANAGE"})
_SQL_LEVELS = frozenset({"CAN_EDIT", "CAN_RUN", "CAN_MANAGE"})


def _row(
    field: str,
    object_type: str,
    resource_type: str,
    levels: set[str] | frozenset[str],
    resolution: IdResolution = IdResolution.DIRECT,
) -> TypeMapping:
    return TypeMapping(field, object_type, resource_type, frozenset(levels), resolution)


# Order matters: lookups by object type and field return the first match.
_TYPE_MAPPINGS: tuple[TypeMapping, ...] = (
    _row("cluster_policy_id", "cluster-policy", "cluster-policies", {"CAN_USE"}),
    _row("instance_pool_id", "instance-pool", "instance-pools", {"CAN_ATTACH_TO", "CAN_MANAGE"}),
    _row("cluster_id", "cluster", "clusters", {"CAN_ATTACH_TO", "CAN_RESTART", "CAN_MANAGE"}),
    _row("pipeline_id", "pipelines", "pipelines", {"CAN_VIEW", "CAN_RUN", "CAN_MANAGE", "IS_OWNER"}),
    _row("job_id", "job", "jobs", {"CAN_VIEW", "CAN_MANAGE_RUN", "IS_OWNER", "CAN_MANAGE"}),
    _row("notebook_id", "notebook", "notebooks", _WORKSPACE_LEVELS),
    _row("notebook_path", "notebook", "notebooks", _WORKSPACE_LEVELS, IdResolution.PATH),
    _row("directory_id", "directory", "directories", _WORKSPACE_LEVELS),
    _row("directory_path", "directory", "directories", _WORKSPACE_LEVELS, IdResolution.PATH),
    _row("repo_id", "repo", "repos", _WORKSPACE_LEVELS),
    _row("repo_path", "repo", "repos", _WORKSPACE_LEVELS, IdResolution.PATH),
    _row("authorization", "tokens", "authorization", {"CAN_USE"}),
    _row("authorization", "passwords", "authorization", {"CAN_USE"}),
    _row("sql_endpoint_id", "warehouses", "sql/warehouses", {"CAN_USE", "CAN_MANAGE"}),
    _row("sql_dashboard_id", "dashboard", "sql/dashboards", _SQL_LEVELS),
    _row("sql_alert_id", "alert", "sql/alerts", _SQL_LEVELS),
    _row("sql_query_id", "query", "sql/queries", _SQL_LEVELS),
    _row("experiment_id", "mlflowExperiment", "experiments", {"CAN_READ", "CAN_EDIT", "CAN_MANAGE"}),
    _row(
        "registered_model_id",
        "registered-model",
        "registered-models",
        {
            "CAN_READ",
            "CAN_EDIT",
            "CAN_MANAGE_STAGING_VERSIONS",
            "CAN_MANAGE_PRODUCTION_VERSIONS",
            "CAN_MANAGE",
        },
    ),
)


def _index_by_field(rows: tuple[TypeMapping, ...]) -> dict[str, TypeMapping]:
    """Index rows by field; rows sharing a field must agree on everything but the type tag."""
    index: dict[str, TypeMapping] = {}
    for row in rows:
        first = index.setdefault(row.field, row)
        if (first.resource_type, first.allowed_permission_levels, first.resolution) != (
            row.resource_type,
            row.allowed_permission_levels,
            row.resolution,
        ):
            raise ValueError(f"conflicting registry rows for field {row.field}")
    return index


_BY_FIELD = _index_by_field(_TYPE_MAPPINGS)


def type_mappings() -> tuple[TypeMapping, ...]:
    """All registry rows in table order."""
    return _TYPE_MAPPINGS


def identifier_fields() -> list[str]:
    """Distinct identifier field names in table order."""
    return list(_BY_FIELD)


def mapping_for_field(field: str) -> TypeMapping:
    """Row for an identifier field such as ``job_id``."""
    mapping = _BY_FIELD.get(field)
    if mapping is None:
        raise ValidationError(f"unknown identifier field {field}")
    return mapping


def mapping_for_identifiers(identifiers: dict[str, str]) -> TypeMapping:
    """Row for the single identifier field set in a declaration."""
    declared = [f for f in _BY_FIELD if identifiers.get(f)]
    if not declared:
        raise ValidationError("at least one type of resource identifiers must be set")
    if len(declared) > 1:
        raise ValidationError(f"conflicting identifiers: {', '.join(declared)}")
    return _BY_FIELD[declared[0]]


def mapping_for_object_type(object_type: str) -> TypeMapping:
    """First row carrying the object type tag reported by the platform."""
    for mapping in _TYPE_MAPPINGS:
        if mapping.object_type == object_type:
            return mapping
    raise UnknownObjectType(f"unknown object type {object_type}")


def mapping_for_reference(reference: str) -> TypeMapping:
    """Row whose resource segment prefixes the reference (most specific first)."""
    candidates = sorted(_TYPE_MAPPINGS, key=lambda m: len(m.resource_type), reverse=True)
    for mapping in candidates:
        if reference.startswith(mapping.reference_prefix):
            return mapping
    raise UnknownObjectType(f"unknown object reference {reference}")


def check_permission_level(mapping: TypeMapping, permission_level: str) -> None:
    """Raise ValidationError when the level is not valid for the mapping's objects."""
    if permission_level not in mapping.allowed_permission_levels:
        raise ValidationError(
            f"permission_level {permission_level} is not supported with {mapping.field} objects"
        )


async def resolve_identifier(
    mapping: TypeMapping, value: str, path_resolver: PathResolver
) -> str:
    """Turn a declared identifier into the platform object id."""
    if mapping.resolution is IdResolution.DIRECT:
        return value
    try:
        object_id = await path_resolver.resolve_object_id(value)
    except AclSyncError as e:
        raise ResolutionError(f"cannot load path {value}: {e}") from e
    return str(object_id)
