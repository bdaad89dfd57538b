"""In-memory override store."""

import logging
from collections.abc import Iterable, Mapping

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class InMemoryOverrideStore:
    """Subject id -> custom permission set that replaces role defaults.

    Absence of an entry means "use role defaults"; an empty frozenset means
    "no permissions at all". Same copy-on-write discipline as the registry.
    """

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog
        self._overrides: dict[str, frozenset[Permission]] = {}

    def get_override(self, subject_id: str) -> frozenset[Permission] | None:
        return self._overrides.get(subject_id)

    def set_override(self, subject_id: str, permissions: Iterable[Permission | str]) -> None:
        """Install or replace the override. Validates before touching state."""
        parsed = self._catalog.parse_many(permissions)
        self._overrides[subject_id] = parsed

    def clear_override(self, subject_id: str) -> None:
        """Revert subject to live role defaults. No-op if already default."""
        self._overrides.pop(subject_id, None)

    def has_override(self, subject_id: str) -> bool:
        return subject_id in self._overrides

    def list_overrides(self) -> dict[str, frozenset[Permission]]:
        return dict(self._overrides)

    def load(self, overrides: Mapping[str, Iterable[Permission | str]]) -> None:
        """Replace all overrides. Nothing changes if any entry is invalid."""
        loaded = {sid: self._catalog.parse_many(perms) for sid, perms in overrides.items()}
        self._overrides = loaded
        logger.info("Loaded %d override(s)", len(loaded))
