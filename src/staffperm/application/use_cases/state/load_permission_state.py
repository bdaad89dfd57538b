"""Load permission state use case."""

import asyncio
import logging

from staffperm.application.ports import OverrideStore, RoleRegistry, SubjectDirectory
from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.default_roles import DEFAULT_ROLE_PERMISSIONS
from staffperm.domain.entities import Role

logger = logging.getLogger(__name__)


class LoadPermissionStateUseCase:
    """Populate the in-memory registry, store and directory from persistence.

    Runs at startup and on reload. Everything is read and validated against
    the catalog before any in-memory structure is replaced, so a stored
    identifier that is no longer enabled aborts the load with the previous
    state intact. When no roles have been stored yet the default roles are
    written first.

    The read and the swap happen under ``state_lock``, the lock shared with
    the administration use cases, so a snapshot never overwrites a change
    committed after it was taken.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        roles: RoleRegistry,
        overrides: OverrideStore,
        subjects: SubjectDirectory,
        catalog: PermissionCatalog | None = None,
        state_lock: asyncio.Lock | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._roles = roles
        self._overrides = overrides
        self._subjects = subjects
        self._catalog = catalog or PermissionCatalog()
        self._state_lock = state_lock or asyncio.Lock()

    async def execute(self) -> None:
        async with self._state_lock:
            async with self._uow_factory() as uow:
                stored_roles = await uow.roles.list_all()
                if not stored_roles:
                    logger.info(
                        "No roles stored, seeding %d default role(s)",
                        len(DEFAULT_ROLE_PERMISSIONS),
                    )
                    stored_roles = [
                        Role(name=name, permissions=perms)
                        for name, perms in DEFAULT_ROLE_PERMISSIONS.items()
                    ]
                    for role in stored_roles:
                        await uow.roles.save(role)
                stored_overrides = await uow.overrides.list_all()
                stored_subjects = await uow.subjects.list_all()

            role_map = {r.name: self._catalog.parse_many(r.permissions) for r in stored_roles}
            override_map = {
                o.subject_id: self._catalog.parse_many(o.permissions) for o in stored_overrides
            }
            self._roles.load(role_map)
            self._overrides.load(override_map)
            self._subjects.load(stored_subjects)

        logger.info(
            "Permission state loaded: %d role(s), %d override(s), %d subject(s)",
            len(role_map),
            len(override_map),
            len(stored_subjects),
        )
