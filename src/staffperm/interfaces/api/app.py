"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from staffperm.interfaces.api.resources.catalog import CatalogResource
from staffperm.interfaces.api.resources.health import HealthResource
from staffperm.interfaces.api.resources.me import (
    MyPermissionCheckResource,
    MyPermissionsResource,
)
from staffperm.interfaces.api.resources.roles import (
    RoleGrantRequiredResource,
    RoleResource,
    RolesResource,
)
from staffperm.interfaces.api.resources.state import StateReloadResource
from staffperm.interfaces.api.resources.subjects import (
    SubjectPermissionToggleResource,
    SubjectPermissionsResource,
    SubjectRoleResource,
)

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    middleware: list,
    health_resource: HealthResource,
    catalog_resource: CatalogResource,
    roles_resource: RolesResource,
    role_resource: RoleResource,
    role_grant_resource: RoleGrantRequiredResource,
    subject_permissions_resource: SubjectPermissionsResource,
    toggle_resource: SubjectPermissionToggleResource,
    subject_role_resource: SubjectRoleResource,
    my_permissions_resource: MyPermissionsResource,
    my_permission_check_resource: MyPermissionCheckResource,
    state_reload_resource: StateReloadResource | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/permissions", catalog_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_name}", role_resource)
    app.add_route("/v1/roles/{role_name}/grant-required", role_grant_resource)
    app.add_route("/v1/subjects/{subject_id}/permissions", subject_permissions_resource)
    app.add_route(
        "/v1/subjects/{subject_id}/permissions/{permission}/toggle",
        toggle_resource,
    )
    app.add_route("/v1/subjects/{subject_id}/role", subject_role_resource)
    app.add_route("/v1/me/permissions", my_permissions_resource)
    app.add_route("/v1/me/permissions/{permission}", my_permission_check_resource)
    if state_reload_resource is not None:
        app.add_route("/v1/state/reload", state_reload_resource)
    return app
