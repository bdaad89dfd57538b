"""Unit tests for InMemorySubjectDirectory."""

import pytest

from staffperm.domain.entities import Subject
from staffperm.domain.exceptions import NotFound
from staffperm.infrastructure.memory.subject_directory import InMemorySubjectDirectory


def test_get_unknown_is_none(subjects: InMemorySubjectDirectory) -> None:
    assert subjects.get("nobody") is None


def test_list_by_role(subjects: InMemorySubjectDirectory) -> None:
    assert {s.id for s in subjects.list_by_role("Manager")} == {"E1", "E2"}


def test_assign_role_replaces_subject(subjects: InMemorySubjectDirectory) -> None:
    updated = subjects.assign_role("E3", "Manager")
    assert updated == Subject(id="E3", role="Manager")
    assert subjects.get("E3").role == "Manager"


def test_assign_role_unknown_subject(subjects: InMemorySubjectDirectory) -> None:
    with pytest.raises(NotFound, match="Subject"):
        subjects.assign_role("nobody", "Manager")


def test_load_replaces_all() -> None:
    directory = InMemorySubjectDirectory([Subject(id="a", role="r")])
    directory.load([Subject(id="b", role="r")])
    assert directory.get("a") is None
    assert directory.get("b") is not None
