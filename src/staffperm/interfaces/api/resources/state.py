"""Permission state reload resource."""

import falcon.asgi

from staffperm.application.ports import PermissionChecker
from staffperm.application.use_cases.state.load_permission_state import (
    LoadPermissionStateUseCase,
)
from staffperm.domain.exceptions import InvalidPermission
from staffperm.domain.value_objects import Permission


class StateReloadResource:
    """POST /v1/state/reload - re-read roles, overrides and subjects."""

    def __init__(
        self,
        load_state: LoadPermissionStateUseCase,
        permission_checker: PermissionChecker,
        admin_permission: Permission = Permission.MANAGE_SETTINGS,
    ) -> None:
        self._load_state = load_state
        self._permission_checker = permission_checker
        self._admin_permission = admin_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        subject = req.context.subject
        if subject is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if not self._permission_checker.has_permission(subject, self._admin_permission):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        try:
            await self._load_state.execute()
        except InvalidPermission as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": f"Stored state references {e}", "invalid": e.identifiers}
            return
        resp.status = falcon.HTTP_204
