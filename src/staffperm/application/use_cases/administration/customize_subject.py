"""Customize subject use case."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Override, Subject
from staffperm.domain.exceptions import NotFound
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class CustomizeSubjectUseCase(AdministrationUseCase):
    """Install an override that fully replaces the subject's role defaults."""

    async def execute(
        self,
        actor: Subject | None,
        subject_id: str,
        permissions: Iterable[Permission | str],
    ) -> Override:
        self._authorize(actor)
        parsed = self._catalog.parse_many(permissions)

        async with self._state_lock:
            if self._subjects.get(subject_id) is None:
                raise NotFound("Subject", subject_id)

            override = Override(
                subject_id=subject_id,
                permissions=parsed,
                updated_at=datetime.now(UTC),
                updated_by=actor.id,
            )
            async with self._uow_factory() as uow:
                await uow.overrides.save(override)

            self._overrides.set_override(subject_id, override.permissions)

        logger.info(
            "%s customized subject %s to %s",
            actor.id,
            subject_id,
            sorted(override.permissions),
        )
        return override
