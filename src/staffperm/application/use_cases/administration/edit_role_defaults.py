"""Edit role defaults use case."""

import logging
from collections.abc import Iterable

from staffperm.application.use_cases.administration.base import AdministrationUseCase
from staffperm.domain.entities import Role, Subject
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class EditRoleDefaultsUseCase(AdministrationUseCase):
    """Replace a role's default permissions wholesale, creating the role if new.

    Subjects of the role without an override pick up the change on their
    next check.
    """

    async def execute(
        self,
        actor: Subject | None,
        role_name: str,
        permissions: Iterable[Permission | str],
    ) -> Role:
        self._authorize(actor)
        role = Role(name=role_name, permissions=self._catalog.parse_many(permissions))

        async with self._state_lock:
            async with self._uow_factory() as uow:
                await uow.roles.save(role)
            self._roles.set_defaults(role.name, role.permissions)

        logger.info(
            "%s set defaults of role %r to %s",
            actor.id,
            role_name,
            sorted(role.permissions),
        )
        return role
