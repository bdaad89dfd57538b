"""In-memory subject directory."""

from collections.abc import Iterable

from staffperm.domain.entities import Subject
from staffperm.domain.exceptions import NotFound


class InMemorySubjectDirectory:
    """Subject id -> Subject, populated from persistence at startup."""

    def __init__(self, subjects: Iterable[Subject] = ()) -> None:
        self._by_id: dict[str, Subject] = {s.id: s for s in subjects}

    def get(self, subject_id: str) -> Subject | None:
        return self._by_id.get(subject_id)

    def list_by_role(self, role_name: str) -> list[Subject]:
        return [s for s in self._by_id.values() if s.role == role_name]

    def assign_role(self, subject_id: str, role_name: str) -> Subject:
        if subject_id not in self._by_id:
            raise NotFound("Subject", subject_id)
        updated = Subject(id=subject_id, role=role_name)
        self._by_id[subject_id] = updated
        return updated

    def load(self, subjects: Iterable[Subject]) -> None:
        self._by_id = {s.id: s for s in subjects}
