"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from staffperm.application.use_cases.administration.assign_role import AssignRoleUseCase
from staffperm.application.use_cases.administration.customize_subject import (
    CustomizeSubjectUseCase,
)
from staffperm.application.use_cases.administration.edit_role_defaults import (
    EditRoleDefaultsUseCase,
)
from staffperm.application.use_cases.administration.grant_required_permissions import (
    GrantRequiredPermissionsUseCase,
)
from staffperm.application.use_cases.administration.reset_subject import (
    ResetSubjectUseCase,
)
from staffperm.application.use_cases.administration.toggle_permission import (
    TogglePermissionUseCase,
)
from staffperm.application.use_cases.state.load_permission_state import (
    LoadPermissionStateUseCase,
)
from staffperm.interfaces.api.app import create_app
from staffperm.interfaces.api.middleware.auth import AuthMiddleware
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


@pytest.fixture
def app(admin_deps, roles, overrides, subjects, resolver, catalog, uow_factory, state_lock):
    """Falcon ASGI app over in-memory state; acting subject comes from X-Subject-Id."""
    load_state = LoadPermissionStateUseCase(
        uow_factory, roles, overrides, subjects, catalog, state_lock=state_lock
    )
    return create_app(
        middleware=[AuthMiddleware(subjects, trust_subject_header=True)],
        health_resource=HealthResource(roles),
        catalog_resource=CatalogResource(catalog),
        roles_resource=RolesResource(roles, resolver),
        role_resource=RoleResource(EditRoleDefaultsUseCase(**admin_deps)),
        role_grant_resource=RoleGrantRequiredResource(
            GrantRequiredPermissionsUseCase(**admin_deps)
        ),
        subject_permissions_resource=SubjectPermissionsResource(
            subjects,
            overrides,
            resolver,
            CustomizeSubjectUseCase(**admin_deps),
            ResetSubjectUseCase(**admin_deps),
        ),
        toggle_resource=SubjectPermissionToggleResource(TogglePermissionUseCase(**admin_deps)),
        subject_role_resource=SubjectRoleResource(AssignRoleUseCase(**admin_deps)),
        my_permissions_resource=MyPermissionsResource(resolver),
        my_permission_check_resource=MyPermissionCheckResource(resolver),
        state_reload_resource=StateReloadResource(load_state, resolver),
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
