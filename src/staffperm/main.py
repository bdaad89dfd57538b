"""Application entry point and composition root."""

import argparse
import asyncio
import logging

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
from staffperm.config import Settings, get_settings
from staffperm.domain.catalog import PermissionCatalog
from staffperm.infrastructure.auth.keycloak_provider import KeycloakProvider
from staffperm.infrastructure.memory.override_store import InMemoryOverrideStore
from staffperm.infrastructure.memory.role_registry import InMemoryRoleRegistry
from staffperm.infrastructure.memory.subject_directory import InMemorySubjectDirectory
from staffperm.infrastructure.permission.permission_resolver import PermissionResolver
from staffperm.infrastructure.persistence.postgres.connection import create_pool
from staffperm.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from staffperm.interfaces.api.app import create_app
from staffperm.interfaces.api.middleware.auth import AuthMiddleware
from staffperm.interfaces.api.middleware.state_lifespan import StateLifespanMiddleware
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


def configure_logging(settings: Settings) -> None:
    """Configure root logging once, from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_staffperm_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    catalog = PermissionCatalog()
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool, catalog)
    state_lock = asyncio.Lock()

    roles = InMemoryRoleRegistry(catalog, strict=settings.strict_roles)
    overrides = InMemoryOverrideStore(catalog)
    subjects = InMemorySubjectDirectory()
    resolver = PermissionResolver(roles, overrides, catalog)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None and not settings.trust_subject_header:
        logger.warning("No principal source configured; every request is anonymous")

    admin_deps = dict(
        unit_of_work_factory=uow_factory,
        permission_checker=resolver,
        roles=roles,
        overrides=overrides,
        subjects=subjects,
        catalog=catalog,
        admin_permission=settings.admin_permission,
        state_lock=state_lock,
    )
    load_state = LoadPermissionStateUseCase(
        unit_of_work_factory=uow_factory,
        roles=roles,
        overrides=overrides,
        subjects=subjects,
        catalog=catalog,
        state_lock=state_lock,
    )

    return create_app(
        middleware=[
            StateLifespanMiddleware(pool, load_state),
            AuthMiddleware(
                subjects,
                keycloak_provider=keycloak,
                trust_subject_header=settings.trust_subject_header,
            ),
        ],
        health_resource=HealthResource(roles),
        catalog_resource=CatalogResource(catalog),
        roles_resource=RolesResource(roles, resolver, settings.admin_permission),
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
            settings.admin_permission,
        ),
        toggle_resource=SubjectPermissionToggleResource(TogglePermissionUseCase(**admin_deps)),
        subject_role_resource=SubjectRoleResource(AssignRoleUseCase(**admin_deps)),
        my_permissions_resource=MyPermissionsResource(resolver),
        my_permission_check_resource=MyPermissionCheckResource(resolver),
        state_reload_resource=StateReloadResource(
            load_state, resolver, settings.admin_permission
        ),
    )


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    parser = argparse.ArgumentParser(prog="staffperm")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args()

    configure_logging(settings)
    uvicorn.run(create_staffperm_app(settings), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
