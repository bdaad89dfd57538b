"""Permission catalog - the closed set of checkable permissions."""

from collections.abc import Iterable, Iterator

from staffperm.domain.exceptions import InvalidPermission
from staffperm.domain.value_objects import PERMISSION_LABELS, Permission


class PermissionCatalog:
    """Permissions enabled for this deployment.

    Defaults to every member of ``Permission``. A deployment may enable a
    subset; members outside it are treated exactly like unknown strings.
    ``parse`` and ``parse_many`` are the boundary where external identifiers
    (request bodies, database rows) become ``Permission`` values.
    """

    def __init__(self, permissions: Iterable[Permission] | None = None) -> None:
        enabled = set(Permission) if permissions is None else set(permissions)
        self._ordered = tuple(p for p in Permission if p in enabled)
        self._enabled = frozenset(self._ordered)

    def __iter__(self) -> Iterator[Permission]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, value: object) -> bool:
        return self.is_valid(value)

    def is_valid(self, value: object) -> bool:
        """True if value names an enabled permission."""
        if isinstance(value, Permission):
            return value in self._enabled
        if not isinstance(value, str):
            return False
        try:
            return Permission(value) in self._enabled
        except ValueError:
            return False

    def all_permissions(self) -> frozenset[Permission]:
        return self._enabled

    def label(self, permission: Permission) -> str:
        return PERMISSION_LABELS.get(permission, permission.value)

    def parse(self, value: object) -> Permission:
        """Convert one identifier to a Permission or raise InvalidPermission."""
        if not self.is_valid(value):
            raise InvalidPermission([str(value)])
        return Permission(value)

    def parse_many(self, values: Iterable[object]) -> frozenset[Permission]:
        """Convert identifiers, reporting every invalid one at once."""
        if isinstance(values, str):
            raise InvalidPermission([values])
        values = list(values)
        invalid = [str(v) for v in values if not self.is_valid(v)]
        if invalid:
            raise InvalidPermission(invalid)
        return frozenset(Permission(v) for v in values)
