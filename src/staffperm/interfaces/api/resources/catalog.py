"""Permission catalog resource."""

import falcon.asgi

from staffperm.domain.catalog import PermissionCatalog


class CatalogResource:
    """GET /v1/permissions - recognized permissions with labels."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "items": [
                {"id": p.value, "label": self._catalog.label(p)}
                for p in self._catalog
            ]
        }
        resp.status = falcon.HTTP_200
