"""Health check endpoints."""

import falcon.asgi

from staffperm.application.ports import RoleRegistry


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, roles: RoleRegistry | None = None) -> None:
        self._roles = roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - ready once role state has been loaded."""
        if self._roles is not None and not self._roles.list_roles():
            resp.media = {"status": "loading"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
