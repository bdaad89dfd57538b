"""Override repository port."""

from typing import Protocol

from staffperm.domain.entities import Override


class OverrideRepository(Protocol):
    """Port for override persistence."""

    async def list_all(self) -> list[Override]: ...

    async def save(self, override: Override) -> None: ...

    async def delete(self, subject_id: str) -> None: ...
