"""Assign role use case."""

import logging

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Subject
from staffperm.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class AssignRoleUseCase(AdministrationUseCase):
    """Move a subject to another role. Any override the subject has is kept."""

    async def execute(self, actor: Subject | None, subject_id: str, role_name: str) -> Subject:
        self._authorize(actor)

        async with self._state_lock:
            if not self._roles.has_role(role_name):
                raise NotFound("Role", role_name)
            if self._subjects.get(subject_id) is None:
                raise NotFound("Subject", subject_id)

            async with self._uow_factory() as uow:
                await uow.subjects.update_role(subject_id, role_name)

            subject = self._subjects.assign_role(subject_id, role_name)

        logger.info("%s assigned role %r to subject %s", actor.id, role_name, subject_id)
        return subject
