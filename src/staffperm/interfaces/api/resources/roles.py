"""Role API resources."""

import falcon.asgi

from staffperm.application.ports import PermissionChecker, RoleRegistry
from staffperm.application.use_cases.administration.edit_role_defaults import (
    EditRoleDefaultsUseCase,
)
from staffperm.application.use_cases.administration.grant_required_permissions import (
    GrantRequiredPermissionsUseCase,
)
from staffperm.domain.exceptions import InvalidPermission, Unauthorized, ValidationError
from staffperm.domain.value_objects import Permission
from staffperm.interfaces.api.resources._body import read_permission_list


class RolesResource:
    """GET /v1/roles - roles with their default permissions."""

    def __init__(
        self,
        roles: RoleRegistry,
        permission_checker: PermissionChecker,
        admin_permission: Permission = Permission.MANAGE_SETTINGS,
    ) -> None:
        self._roles = roles
        self._permission_checker = permission_checker
        self._admin_permission = admin_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        subject = req.context.subject
        if subject is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if not self._permission_checker.has_permission(subject, self._admin_permission):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "items": [
                {
                    "name": name,
                    "permissions": sorted(p.value for p in self._roles.get_defaults(name)),
                }
                for name in self._roles.list_roles()
            ]
        }
        resp.status = falcon.HTTP_200


class RoleResource:
    """PUT /v1/roles/{role_name} - replace a role's default permissions."""

    def __init__(self, edit_role_defaults: EditRoleDefaultsUseCase) -> None:
        self._edit = edit_role_defaults

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_name: str,
    ) -> None:
        subject = req.context.subject
        if subject is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            permissions = await read_permission_list(req)
            role = await self._edit.execute(subject, role_name, permissions)
        except InvalidPermission as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "invalid": e.identifiers}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Unauthorized:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "name": role.name,
            "permissions": sorted(p.value for p in role.permissions),
        }
        resp.status = falcon.HTTP_200


class RoleGrantRequiredResource:
    """POST /v1/roles/{role_name}/grant-required.

    Adds permissions to every customized subject of the role; subjects on
    role defaults are not touched.
    """

    def __init__(self, grant_required: GrantRequiredPermissionsUseCase) -> None:
        self._grant = grant_required

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_name: str,
    ) -> None:
        subject = req.context.subject
        if subject is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            permissions = await read_permission_list(req)
            changed = await self._grant.execute(subject, role_name, permissions)
        except InvalidPermission as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "invalid": e.identifiers}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Unauthorized:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {"role": role_name, "updated_subjects": changed}
        resp.status = falcon.HTTP_200
