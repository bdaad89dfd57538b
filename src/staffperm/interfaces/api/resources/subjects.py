"""Subject permission API resources."""

import falcon.asgi

from staffperm.application.ports import OverrideStore, SubjectDirectory
from staffperm.application.use_cases.administration.assign_role import AssignRoleUseCase
from staffperm.application.use_cases.administration.customize_subject import (
    CustomizeSubjectUseCase,
)
from staffperm.application.use_cases.administration.reset_subject import (
    ResetSubjectUseCase,
)
from staffperm.application.use_cases.administration.toggle_permission import (
    TogglePermissionUseCase,
)
from staffperm.domain.exceptions import (
    InvalidPermission,
    NotFound,
    Unauthorized,
    ValidationError,
)
from staffperm.domain.value_objects import Permission
from staffperm.infrastructure.permission.permission_resolver import PermissionResolver
from staffperm.interfaces.api.resources._body import (
    read_permission_list,
    read_string_field,
)


def _unauthenticated(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


def _forbidden(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied"}


class SubjectPermissionsResource:
    """GET/PUT/DELETE /v1/subjects/{subject_id}/permissions.

    GET shows the effective set and where each permission comes from, PUT
    installs an override, DELETE resets the subject to its role defaults.
    """

    def __init__(
        self,
        subjects: SubjectDirectory,
        overrides: OverrideStore,
        resolver: PermissionResolver,
        customize_subject: CustomizeSubjectUseCase,
        reset_subject: ResetSubjectUseCase,
        admin_permission: Permission = Permission.MANAGE_SETTINGS,
    ) -> None:
        self._subjects = subjects
        self._overrides = overrides
        self._resolver = resolver
        self._customize = customize_subject
        self._reset = reset_subject
        self._admin_permission = admin_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_id: str,
    ) -> None:
        actor = req.context.subject
        if actor is None:
            _unauthenticated(resp)
            return
        if actor.id != subject_id and not self._resolver.has_permission(
            actor, self._admin_permission
        ):
            _forbidden(resp)
            return

        subject = self._subjects.get(subject_id)
        if subject is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": f"Subject not found: {subject_id}"}
            return

        resp.media = {
            "subject": subject.id,
            "role": subject.role,
            "customized": self._overrides.has_override(subject.id),
            "effective": sorted(p.value for p in self._resolver.effective_permissions(subject)),
            "status": {
                p.value: status.value for p, status in self._resolver.describe(subject).items()
            },
        }
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_id: str,
    ) -> None:
        actor = req.context.subject
        if actor is None:
            _unauthenticated(resp)
            return

        try:
            permissions = await read_permission_list(req)
            override = await self._customize.execute(actor, subject_id, permissions)
        except InvalidPermission as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "invalid": e.identifiers}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Unauthorized:
            _forbidden(resp)
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "subject": override.subject_id,
            "customized": True,
            "permissions": sorted(p.value for p in override.permissions),
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_id: str,
    ) -> None:
        actor = req.context.subject
        if actor is None:
            _unauthenticated(resp)
            return

        try:
            await self._reset.execute(actor, subject_id)
        except Unauthorized:
            _forbidden(resp)
            return
        resp.status = falcon.HTTP_204


class SubjectPermissionToggleResource:
    """POST /v1/subjects/{subject_id}/permissions/{permission}/toggle."""

    def __init__(self, toggle_permission: TogglePermissionUseCase) -> None:
        self._toggle = toggle_permission

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_id: str,
        permission: str,
    ) -> None:
        actor = req.context.subject
        if actor is None:
            _unauthenticated(resp)
            return

        try:
            override = await self._toggle.execute(actor, subject_id, permission)
        except InvalidPermission as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "invalid": e.identifiers}
            return
        except Unauthorized:
            _forbidden(resp)
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "subject": override.subject_id,
            "permission": permission,
            "granted": permission in override.permissions,
            "permissions": sorted(p.value for p in override.permissions),
        }
        resp.status = falcon.HTTP_200


class SubjectRoleResource:
    """PUT /v1/subjects/{subject_id}/role - move subject to another role."""

    def __init__(self, assign_role: AssignRoleUseCase) -> None:
        self._assign = assign_role

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        subject_id: str,
    ) -> None:
        actor = req.context.subject
        if actor is None:
            _unauthenticated(resp)
            return

        try:
            role_name = await read_string_field(req, "role")
            subject = await self._assign.execute(actor, subject_id, role_name)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except Unauthorized:
            _forbidden(resp)
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"subject": subject.id, "role": subject.role}
        resp.status = falcon.HTTP_200
