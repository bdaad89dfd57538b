"""Shared wiring for administration use cases."""

import asyncio

from staffperm.application.ports import (
    OverrideStore,
    PermissionChecker,
    RoleRegistry,
    SubjectDirectory,
)
from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.entities import Subject
from staffperm.domain.exceptions import Unauthorized
from staffperm.domain.value_objects import Permission


class AdministrationUseCase:
    """Base for mutators of role defaults, overrides and role assignments.

    The caller is authorized through the same checker that gates every other
    feature. Changes are written through the unit of work first and applied
    to the in-memory state only once the write has committed.

    ``state_lock`` must be shared by every administration use case and the
    state loader of one process. Reading current state, persisting and
    applying in memory all happen under it, so no mutation is lost to a
    concurrent one or undone by a reload. Permission checks never take it.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        roles: RoleRegistry,
        overrides: OverrideStore,
        subjects: SubjectDirectory,
        catalog: PermissionCatalog | None = None,
        admin_permission: Permission = Permission.MANAGE_SETTINGS,
        state_lock: asyncio.Lock | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._roles = roles
        self._overrides = overrides
        self._subjects = subjects
        self._catalog = catalog or PermissionCatalog()
        self._admin_permission = admin_permission
        self._state_lock = state_lock or asyncio.Lock()

    def _authorize(self, actor: Subject | None) -> None:
        if not self._permission_checker.has_permission(actor, self._admin_permission):
            raise Unauthorized(
                f"Caller does not hold {self._admin_permission.value}"
            )
