"""Subject repository port."""

from typing import Protocol

from staffperm.domain.entities import Subject


class SubjectRepository(Protocol):
    """Port for subject persistence."""

    async def list_all(self) -> list[Subject]: ...

    async def update_role(self, subject_id: str, role_name: str) -> None: ...
