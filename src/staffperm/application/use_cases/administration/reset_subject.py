"""Reset subject use case."""

import logging

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Subject

logger = logging.getLogger(__name__)


class ResetSubjectUseCase(AdministrationUseCase):
    """Drop a subject's override so it follows live role defaults again."""

    async def execute(self, actor: Subject | None, subject_id: str) -> None:
        """Idempotent: resetting a subject without an override changes nothing."""
        self._authorize(actor)

        async with self._state_lock:
            async with self._uow_factory() as uow:
                await uow.overrides.delete(subject_id)

            had_override = self._overrides.has_override(subject_id)
            self._overrides.clear_override(subject_id)

        if had_override:
            logger.info("%s reset subject %s to role defaults", actor.id, subject_id)
