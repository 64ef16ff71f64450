"""Permissions API resources."""

from typing import Any

import falcon.asgi

from aclsync.application.object_types import identifier_fields, mapping_for_identifiers
from aclsync.application.use_cases.permissions import (
    CreatePermissionsUseCase,
    DeletePermissionsUseCase,
    ReadPermissionsUseCase,
    UpdatePermissionsUseCase,
    ValidatePermissionsUseCase,
)
from aclsync.domain.entities import AccessControlChange, PermissionsEntity
from aclsync.domain.exceptions import (
    AclSyncError,
    NotFound,
    ResolutionError,
    TransportError,
    UnknownObjectType,
    ValidationError,
)
from aclsync.domain.value_objects import PrincipalKind, PrincipalRef

_ERROR_STATUS: tuple[tuple[type[AclSyncError], str], ...] = (
    (ValidationError, falcon.HTTP_422),
    (UnknownObjectType, falcon.HTTP_422),
    (NotFound, falcon.HTTP_404),
    (ResolutionError, falcon.HTTP_424),
    (TransportError, falcon.HTTP_502),
)


class _BadRequest(Exception):
    pass


def _set_error(resp: falcon.asgi.Response, error: AclSyncError) -> None:
    for exc_type, status in _ERROR_STATUS:
        if isinstance(error, exc_type):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    resp.media = {"error": str(error)}


def _parse_changes(items: Any) -> list[AccessControlChange]:
    """Parse ``access_control`` items; principal rules raise ValidationError."""
    if not isinstance(items, list):
        raise _BadRequest("access_control must be a list")
    changes = []
    for item in items:
        if not isinstance(item, dict) or not item.get("permission_level"):
            raise _BadRequest("each access_control item needs a permission_level")
        for key in ("permission_level", *(kind.value for kind in PrincipalKind)):
            if item.get(key) is not None and not isinstance(item[key], str):
                raise _BadRequest(f"{key} must be a string")
        principal = PrincipalRef.from_fields(
            user_name=item.get("user_name"),
            group_name=item.get("group_name"),
            service_principal_name=item.get("service_principal_name"),
        )
        changes.append(AccessControlChange(principal, item["permission_level"]))
    return changes


def _parse_declaration(body: Any) -> tuple[dict[str, str], list[AccessControlChange]]:
    if not isinstance(body, dict):
        raise _BadRequest("request body must be an object")
    identifiers = {f: str(body[f]) for f in identifier_fields() if body.get(f)}
    return identifiers, _parse_changes(body.get("access_control", []))


def _entity_media(reference: str, entity: PermissionsEntity) -> dict[str, Any]:
    return {
        "id": reference,
        "object_type": entity.object_type,
        **entity.identifiers,
        "access_control": [
            {**c.principal.to_fields(), "permission_level": c.permission_level}
            for c in entity.access_control
        ],
    }


class PermissionsResource:
    """/v1/permissions - declarative permissions of one object, addressed by ``?id=``."""

    def __init__(
        self,
        create_permissions: CreatePermissionsUseCase,
        read_permissions: ReadPermissionsUseCase,
        update_permissions: UpdatePermissionsUseCase,
        delete_permissions: DeletePermissionsUseCase,
        validate_permissions: ValidatePermissionsUseCase,
    ) -> None:
        self._create = create_permissions
        self._read = read_permissions
        self._update = update_permissions
        self._delete = delete_permissions
        self._validate = validate_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Current declarable permissions; path identifiers may be passed as query params."""
        reference = req.get_param("id", required=True)
        declared_paths = {
            f: req.get_param(f)
            for f in identifier_fields()
            if f.endswith("_path") and req.get_param(f)
        }
        try:
            entity = await self._read.execute(reference, declared_paths)
        except AclSyncError as e:
            _set_error(resp, e)
            return
        if entity is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"no permissions declared for {reference}"}
            return
        resp.media = _entity_media(reference, entity)
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Declare permissions for the object named by one identifier field."""
        try:
            identifiers, changes = _parse_declaration(await req.get_media())
        except _BadRequest as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            _set_error(resp, e)
            return

        try:
            reference = await self._create.execute(identifiers, changes)
        except AclSyncError as e:
            _set_error(resp, e)
            return
        resp.media = {"id": reference}
        resp.status = falcon.HTTP_201

    async def on_post_validate(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Plan-time validation without touching the object."""
        try:
            identifiers, changes = _parse_declaration(await req.get_media())
        except _BadRequest as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            _set_error(resp, e)
            return

        try:
            await self._validate.execute(mapping_for_identifiers(identifiers), changes)
        except AclSyncError as e:
            _set_error(resp, e)
            return
        resp.media = {"valid": True}
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Replace declared permissions of an existing reference."""
        reference = req.get_param("id", required=True)
        try:
            body = await req.get_media()
            if not isinstance(body, dict):
                raise _BadRequest("request body must be an object")
            changes = _parse_changes(body.get("access_control", []))
        except _BadRequest as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            _set_error(resp, e)
            return

        try:
            await self._update.execute(reference, changes)
        except AclSyncError as e:
            _set_error(resp, e)
            return
        resp.status = falcon.HTTP_204

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Reset the object to its baseline permissions."""
        reference = req.get_param("id", required=True)
        try:
            await self._delete.execute(reference)
        except AclSyncError as e:
            _set_error(resp, e)
            return
        resp.status = falcon.HTTP_204
