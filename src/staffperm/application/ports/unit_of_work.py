"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from staffperm.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from staffperm.application.ports.repositories.role_repository import RoleRepository
from staffperm.application.ports.repositories.subject_repository import (
    SubjectRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def overrides(self) -> OverrideRepository: ...

    @property
    def subjects(self) -> SubjectRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
