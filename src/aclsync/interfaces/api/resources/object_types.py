"""Object types API - registry of permission-bearing object kinds."""

import falcon.asgi

from aclsync.application.object_types import type_mappings


class ObjectTypesResource:
    """GET /v1/object-types - identifier fields and their allowed permission levels."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "items": [
                {
                    "field": m.field,
                    "object_type": m.object_type,
                    "resource_type": m.resource_type,
                    "allowed_permission_levels": sorted(m.allowed_permission_levels),
                    "resolution": m.resolution.value,
                }
                for m in type_mappings()
            ]
        }
        resp.status = falcon.HTTP_200
