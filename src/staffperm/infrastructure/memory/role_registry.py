"""In-memory role registry."""

import logging
from collections.abc import Iterable, Mapping

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.exceptions import NotFound
from staffperm.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class InMemoryRoleRegistry:
    """Role name -> default permissions, read live by the resolver.

    Values are frozensets and every write replaces a whole entry, so readers
    see either the old or the new set for a role and never take a lock.
    ``load`` builds a new mapping and swaps the reference in one assignment.

    With ``strict=True`` an unknown role raises ``NotFound`` instead of
    returning the empty set.
    """

    def __init__(self, catalog: PermissionCatalog, strict: bool = False) -> None:
        self._catalog = catalog
        self._strict = strict
        self._defaults: dict[str, frozenset[Permission]] = {}

    def get_defaults(self, role_name: str) -> frozenset[Permission]:
        """Default permissions for role; empty (or NotFound if strict) when unknown."""
        defaults = self._defaults.get(role_name)
        if defaults is None:
            if self._strict:
                raise NotFound("Role", role_name)
            return frozenset()
        return defaults

    def set_defaults(self, role_name: str, permissions: Iterable[Permission | str]) -> None:
        """Replace role defaults wholesale. Validates before touching state."""
        parsed = self._catalog.parse_many(permissions)
        self._defaults[role_name] = parsed

    def has_role(self, role_name: str) -> bool:
        return role_name in self._defaults

    def list_roles(self) -> list[str]:
        """Role names in insertion order."""
        return list(self._defaults)

    def load(self, roles: Mapping[str, Iterable[Permission | str]]) -> None:
        """Replace the whole registry. Nothing changes if any entry is invalid."""
        loaded = {name: self._catalog.parse_many(perms) for name, perms in roles.items()}
        self._defaults = loaded
        logger.info("Loaded %d role(s)", len(loaded))
