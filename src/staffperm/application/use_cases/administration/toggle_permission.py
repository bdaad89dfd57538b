"""Toggle permission use case."""

import logging
from datetime import UTC, datetime

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Override, Subject
from staffperm.domain.exceptions import NotFound
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class TogglePermissionUseCase(AdministrationUseCase):
    """Flip one permission for one subject.

    A subject still on role defaults is first given an override equal to
    those defaults, so the result is always an override. The current set is
    read under the state lock, so concurrent toggles of one subject compose.
    """

    async def execute(
        self,
        actor: Subject | None,
        subject_id: str,
        permission: Permission | str,
    ) -> Override:
        self._authorize(actor)
        perm = self._catalog.parse(permission)

        async with self._state_lock:
            subject = self._subjects.get(subject_id)
            if subject is None:
                raise NotFound("Subject", subject_id)

            current = self._overrides.get_override(subject_id)
            if current is None:
                current = self._roles.get_defaults(subject.role)
            updated = current - {perm} if perm in current else current | {perm}

            override = Override(
                subject_id=subject_id,
                permissions=frozenset(updated),
                updated_at=datetime.now(UTC),
                updated_by=actor.id,
            )
            async with self._uow_factory() as uow:
                await uow.overrides.save(override)

            self._overrides.set_override(subject_id, override.permissions)

        logger.info(
            "%s toggled %s for subject %s (now %s)",
            actor.id,
            perm.value,
            subject_id,
            "granted" if perm in updated else "revoked",
        )
        return override
