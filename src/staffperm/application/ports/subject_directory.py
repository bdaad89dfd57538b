"""Subject directory port - resolves subject ids to their role."""

from collections.abc import Iterable
from typing import Protocol

from staffperm.domain.entities import Subject


class SubjectDirectory(Protocol):
    """Port supplying {id, role} for principals owned by the host application."""

    def get(self, subject_id: str) -> Subject | None: ...

    def list_by_role(self, role_name: str) -> list[Subject]: ...

    def assign_role(self, subject_id: str, role_name: str) -> Subject: ...

    def load(self, subjects: Iterable[Subject]) -> None: ...
