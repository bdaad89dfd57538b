"""Override store port - per-subject replacement permission sets."""

from collections.abc import Iterable, Mapping
from typing import Protocol

from staffperm.domain.value_objects import Permission


class OverrideStore(Protocol):
    """Port for subject id -> optional custom permission set."""

    def get_override(self, subject_id: str) -> frozenset[Permission] | None: ...

    def set_override(self, subject_id: str, permissions: Iterable[Permission | str]) -> None: ...

    def clear_override(self, subject_id: str) -> None: ...

    def has_override(self, subject_id: str) -> bool: ...

    def list_overrides(self) -> dict[str, frozenset[Permission]]: ...

    def load(self, overrides: Mapping[str, Iterable[Permission | str]]) -> None: ...
