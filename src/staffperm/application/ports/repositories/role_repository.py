"""Role repository port."""

from typing import Protocol

from staffperm.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def list_all(self) -> list[Role]: ...

    async def save(self, role: Role) -> None: ...
