"""Acting subject's own permission checks."""

import falcon.asgi

from staffperm.application.ports import PermissionChecker


class MyPermissionsResource:
    """GET /v1/me/permissions - effective permissions of the acting subject."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        subject = req.context.subject
        resp.media = {
            "subject": subject.id if subject else None,
            "permissions": sorted(
                p.value for p in self._permission_checker.effective_permissions(subject)
            ),
        }
        resp.status = falcon.HTTP_200


class MyPermissionCheckResource:
    """GET /v1/me/permissions/{permission} - {"allowed": bool}, never an error."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        permission: str,
    ) -> None:
        allowed = self._permission_checker.has_permission(req.context.subject, permission)
        resp.media = {"permission": permission, "allowed": allowed}
        resp.status = falcon.HTTP_200
