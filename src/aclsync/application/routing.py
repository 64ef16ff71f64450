"""Routing policy - URL path, write verb and self-grant rule per object reference.

SQL assets other than warehouses live under a separate preview API that models
permission updates as incremental changes (POST) instead of replacements (PUT).
Routing is keyed off the reference string so the same rule applies to raw reads.
"""

from dataclasses import dataclass
from enum import StrEnum

_SQL_PREFIX = "/sql/"
_SQL_WAREHOUSES_PREFIX = "/sql/warehouses"

# Replacement writes on these silently revoke the caller's own CAN_MANAGE.
_SELF_GRANT_PREFIXES = ("/registered-models/", "/clusters/", "/queries/")


class WriteMethod(StrEnum):
    """HTTP verb used to write permissions."""

    PUT = "PUT"
    POST = "POST"


@dataclass(frozen=True)
class Route:
    """Where and how to send a permissions write."""

    path: str
    method: WriteMethod


def is_sql_asset(reference: str) -> bool:
    return reference.startswith(_SQL_PREFIX) and not reference.startswith(
        _SQL_WAREHOUSES_PREFIX
    )


def url_path_for(reference: str) -> str:
    """Permissions API path for the object reference."""
    if is_sql_asset(reference):
        return "/preview/sql/permissions" + reference[len("/sql"):]
    return "/permissions" + reference


def write_method_for(reference: str) -> WriteMethod:
    if is_sql_asset(reference):
        return WriteMethod.POST
    return WriteMethod.PUT


def requires_self_grant(reference: str) -> bool:
    """True when the caller must explicitly re-grant itself CAN_MANAGE on writes."""
    return reference.startswith(_SELF_GRANT_PREFIXES) or is_sql_asset(reference)


def route_for(reference: str) -> Route:
    return Route(path=url_path_for(reference), method=write_method_for(reference))
