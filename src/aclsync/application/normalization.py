"""Conversion from read-side ACLs to declarable write-side state."""

from aclsync.application.object_types import identifier_fields, mapping_for_object_type
from aclsync.domain.entities import (
    AccessControl,
    AccessControlChange,
    ObjectACL,
    PermissionsEntity,
)
from aclsync.domain.value_objects import (
    ADMIN_GROUP,
    PASSWORDS_REFERENCE,
    PrincipalKind,
    PrincipalRef,
    identifier_of,
)


def to_direct_change(entry: AccessControl) -> AccessControlChange | None:
    """Direct grant held by the entry, or None when it is inherited only."""
    for permission in entry.all_permissions:
        if permission.inherited:
            continue
        return AccessControlChange(entry.principal, permission.permission_level)
    if entry.permission_level:
        return AccessControlChange(entry.principal, entry.permission_level)
    return None


def _is_self(principal: PrincipalRef, me: PrincipalRef) -> bool:
    if principal.kind is PrincipalKind.GROUP:
        return False
    return principal.name == me.name


def to_entity(
    acl: ObjectACL,
    declared_identifiers: dict[str, str],
    me: PrincipalRef,
    reference: str | None = None,
) -> PermissionsEntity:
    """Project an ACL onto the state a user could have declared.

    Entries for ``admins`` (except on the passwords singleton) and for the
    acting principal are skipped: neither can be lowered, so surfacing them
    would only produce spurious diffs.
    """
    passwords = PASSWORDS_REFERENCE in (reference, acl.object_id)
    admins = PrincipalRef.group(ADMIN_GROUP)
    changes: list[AccessControlChange] = []
    for entry in acl.access_control_list:
        if entry.principal == admins and not passwords:
            continue
        if _is_self(entry.principal, me):
            continue
        change = to_direct_change(entry)
        if change is not None:
            changes.append(change)

    mapping = mapping_for_object_type(acl.object_type)
    entity = PermissionsEntity(object_type=mapping.object_type, access_control=changes)
    path_field = f"{mapping.object_type}_path"
    declared_path = declared_identifiers.get(path_field)
    if declared_path and path_field in identifier_fields():
        # reconciling against a path; keep it rather than the resolved id
        entity.identifiers[path_field] = declared_path
    else:
        entity.identifiers[mapping.field] = identifier_of(acl.object_id)
    return entity
