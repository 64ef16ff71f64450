"""Unit tests for platform REST adapters."""

import json

import httpx
import pytest

from aclsync.application.acting_principal import ActingPrincipal
from aclsync.domain.entities import AccessControlChange, Permission
from aclsync.domain.exceptions import ResolutionError, TransportError
from aclsync.domain.value_objects import PrincipalRef
from aclsync.infrastructure.platform import (
    HttpPermissionsTransport,
    PlatformClient,
    PlatformCreatorLookup,
    ScimIdentityResolver,
    WorkspacePathResolver,
)

BASE_URL = "https://workspace.example.com/api/2.0"


def _client(handler) -> PlatformClient:
    return PlatformClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    )


@pytest.mark.asyncio
async def test_transport_get_parses_acl() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/api/2.0/permissions/notebooks/5"
        return httpx.Response(
            200,
            json={
                "object_id": "/notebooks/5",
                "object_type": "notebook",
                "access_control_list": [
                    {
                        "group_name": "admins",
                        "all_permissions": [
                            {
                                "permission_level": "CAN_MANAGE",
                                "inherited": True,
                                "inherited_from_object": ["/directories/"],
                            }
                        ],
                    },
                    {"user_name": "bob", "all_permissions": [{"permission_level": "CAN_RUN"}]},
                    {"all_permissions": [{"permission_level": "CAN_READ"}]},
                ],
            },
        )

    acl = await HttpPermissionsTransport(_client(handler)).get("/permissions/notebooks/5")

    assert acl.object_type == "notebook"
    assert [e.principal for e in acl.access_control_list] == [
        PrincipalRef.group("admins"),
        PrincipalRef.user("bob"),
    ]
    assert acl.access_control_list[0].all_permissions == [
        Permission("CAN_MANAGE", inherited=True, inherited_from_object=("/directories/",))
    ]


@pytest.mark.asyncio
async def test_transport_get_sql_flat_levels_and_null_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/queries/9"):
            return httpx.Response(
                200,
                json={
                    "object_id": "queries/9",
                    "object_type": "query",
                    "access_control_list": [{"user_name": "bob", "permission_level": "CAN_EDIT"}],
                },
            )
        return httpx.Response(200, json={"object_id": "alerts/1", "access_control_list": None})

    transport = HttpPermissionsTransport(_client(handler))
    query = await transport.get("/preview/sql/permissions/queries/9")
    alert = await transport.get("/preview/sql/permissions/alerts/1")

    assert query.access_control_list[0].permission_level == "CAN_EDIT"
    assert query.access_control_list[0].all_permissions == []
    assert alert.access_control_list == []


@pytest.mark.asyncio
async def test_transport_put_and_post_payloads() -> None:
    seen: list[tuple[str, str, dict]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={})

    transport = HttpPermissionsTransport(_client(handler))
    changes = [
        AccessControlChange(PrincipalRef.user("bob"), "CAN_ATTACH_TO"),
        AccessControlChange(PrincipalRef.service_principal("sp"), "CAN_MANAGE"),
    ]
    await transport.put("/permissions/clusters/abc", changes)
    await transport.post("/preview/sql/permissions/queries/9", changes[:1])

    assert seen == [
        (
            "PUT",
            "/api/2.0/permissions/clusters/abc",
            {
                "access_control_list": [
                    {"user_name": "bob", "permission_level": "CAN_ATTACH_TO"},
                    {"service_principal_name": "sp", "permission_level": "CAN_MANAGE"},
                ]
            },
        ),
        (
            "POST",
            "/api/2.0/preview/sql/permissions/queries/9",
            {"access_control_list": [{"user_name": "bob", "permission_level": "CAN_ATTACH_TO"}]},
        ),
    ]


@pytest.mark.asyncio
async def test_transport_put_empty_list_is_sent() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200)

    await HttpPermissionsTransport(_client(handler)).put("/permissions/directories/3", [])
    assert seen == [{"access_control_list": []}]


@pytest.mark.asyncio
async def test_client_maps_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={"error_code": "INVALID_STATE", "message": "Cannot access cluster abc"},
        )

    with pytest.raises(TransportError) as exc_info:
        await _client(handler).get("/permissions/clusters/abc")

    assert exc_info.value.status_code == 400
    assert exc_info.value.error_code == "INVALID_STATE"
    assert "Cannot access cluster" in exc_info.value.message


@pytest.mark.asyncio
async def test_client_maps_non_json_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, content=b"upstream unavailable")

    with pytest.raises(TransportError) as exc_info:
        await _client(handler).get("/permissions/clusters/abc")
    assert exc_info.value.status_code == 503
    assert exc_info.value.error_code is None


@pytest.mark.asyncio
async def test_client_maps_connection_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(TransportError, match="GET /permissions/jobs/1 failed") as exc_info:
        await _client(handler).get("/permissions/jobs/1")
    assert exc_info.value.status_code == 0


@pytest.mark.asyncio
async def test_transport_get_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>login</html>")

    with pytest.raises(TransportError, match="non-JSON body") as exc_info:
        await HttpPermissionsTransport(_client(handler)).get("/permissions/clusters/abc")
    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_transport_get_unexpected_acl_shape() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"object_id": "/clusters/abc", "access_control_list": "everyone"}
        )

    with pytest.raises(TransportError, match="unexpected ACL"):
        await HttpPermissionsTransport(_client(handler)).get("/permissions/clusters/abc")


@pytest.mark.asyncio
async def test_client_rejects_non_object_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "an", "object"])

    with pytest.raises(TransportError, match="non-object body"):
        await _client(handler).get("/jobs/get", params={"job_id": "1"})


@pytest.mark.asyncio
async def test_non_json_identity_becomes_resolution_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>login</html>")

    acting = ActingPrincipal(ScimIdentityResolver(_client(handler)))
    with pytest.raises(ResolutionError, match="cannot resolve current principal"):
        await acting.get()


@pytest.mark.asyncio
async def test_scim_identity_resolver() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/2.0/preview/scim/v2/Me"
        return httpx.Response(200, json={"id": "1", "userName": "alice@example.com"})

    principal = await ScimIdentityResolver(_client(handler)).current_principal()
    assert principal == PrincipalRef.user("alice@example.com")


@pytest.mark.asyncio
async def test_scim_identity_resolver_without_user_name() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": "1"})

    with pytest.raises(ResolutionError):
        await ScimIdentityResolver(_client(handler)).current_principal()


@pytest.mark.asyncio
async def test_workspace_path_resolver() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/2.0/workspace/get-status"
        assert request.url.params["path"] == "/Users/bob/etl"
        return httpx.Response(200, json={"object_type": "NOTEBOOK", "object_id": 4242})

    object_id = await WorkspacePathResolver(_client(handler)).resolve_object_id("/Users/bob/etl")
    assert object_id == 4242


@pytest.mark.asyncio
async def test_creator_lookup() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/2.0/jobs/get":
            assert request.url.params["job_id"] == "42"
            return httpx.Response(200, json={"job_id": 42, "creator_user_name": "carol"})
        assert request.url.path == "/api/2.0/pipelines/p-1"
        return httpx.Response(200, json={"pipeline_id": "p-1"})

    lookup = PlatformCreatorLookup(_client(handler))
    assert await lookup.job_creator("42") == PrincipalRef.user("carol")
    with pytest.raises(ResolutionError, match="pipeline p-1 has no recorded creator"):
        await lookup.pipeline_creator("p-1")
