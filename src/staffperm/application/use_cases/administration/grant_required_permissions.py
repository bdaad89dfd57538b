"""Grant required permissions use case."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Override, Subject
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class GrantRequiredPermissionsUseCase(AdministrationUseCase):
    """Add permissions to the overrides of every customized subject of a role.

    Used when a new capability ships and subjects that diverged from their
    role would otherwise never receive it. Subjects without an override are
    left alone; they already follow the role defaults.
    """

    async def execute(
        self,
        actor: Subject | None,
        role_name: str,
        permissions: Iterable[Permission | str],
    ) -> list[str]:
        """Return ids of subjects whose override changed."""
        self._authorize(actor)
        required = self._catalog.parse_many(permissions)

        async with self._state_lock:
            now = datetime.now(UTC)
            pending: list[Override] = []
            for subject in self._subjects.list_by_role(role_name):
                current = self._overrides.get_override(subject.id)
                if current is None or required <= current:
                    continue
                pending.append(
                    Override(
                        subject_id=subject.id,
                        permissions=current | required,
                        updated_at=now,
                        updated_by=actor.id,
                    )
                )

            if not pending:
                return []

            async with self._uow_factory() as uow:
                for override in pending:
                    await uow.overrides.save(override)

            for override in pending:
                self._overrides.set_override(override.subject_id, override.permissions)

        changed = [o.subject_id for o in pending]
        logger.info(
            "%s granted %s to %d customized subject(s) of role %r",
            actor.id,
            sorted(required),
            len(changed),
            role_name,
        )
        return changed
