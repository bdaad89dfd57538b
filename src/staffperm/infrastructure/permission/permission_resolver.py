"""Permission resolver - override-over-default resolution."""

import logging

from staffperm.application.ports import OverrideStore, RoleRegistry
from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.entities import Subject
from staffperm.domain.exceptions import NotFound
from staffperm.domain.value_objects import Permission, PermissionStatus

logger = logging.getLogger(__name__)


class PermissionResolver:
    """Computes effective permissions from live registry and store state.

    Nothing is cached: every call reads the current override and role
    defaults. Read methods never raise; a missing subject, unknown role or
    unknown permission string all resolve to "not granted".
    """

    def __init__(
        self,
        roles: RoleRegistry,
        overrides: OverrideStore,
        catalog: PermissionCatalog | None = None,
    ) -> None:
        self._roles = roles
        self._overrides = overrides
        self._catalog = catalog or PermissionCatalog()

    def role_defaults(self, role_name: str) -> frozenset[Permission]:
        """Role defaults, degrading an unknown role to the empty set."""
        try:
            return self._roles.get_defaults(role_name)
        except NotFound:
            logger.warning("Unknown role %r resolved to no permissions", role_name)
            return frozenset()

    def effective_permissions(self, subject: Subject | None) -> frozenset[Permission]:
        """Override verbatim if present, otherwise the role's current defaults."""
        if subject is None:
            return frozenset()
        override = self._overrides.get_override(subject.id)
        if override is not None:
            return override
        return self.role_defaults(subject.role)

    def has_permission(self, subject: Subject | None, permission: Permission | str) -> bool:
        """Fail-closed single permission check."""
        if subject is None:
            return False
        if not self._catalog.is_valid(permission):
            logger.warning("Check for unknown permission %r denied", permission)
            return False
        return Permission(permission) in self.effective_permissions(subject)

    def permission_status(self, subject: Subject, permission: Permission) -> PermissionStatus:
        """Where a permission's state comes from, for administration screens."""
        if self._overrides.get_override(subject.id) is None:
            if permission in self.role_defaults(subject.role):
                return PermissionStatus.DEFAULT_ON
            return PermissionStatus.DEFAULT_OFF
        if self.has_permission(subject, permission):
            return PermissionStatus.CUSTOM_ON
        return PermissionStatus.CUSTOM_OFF

    def describe(self, subject: Subject) -> dict[Permission, PermissionStatus]:
        """Status of every catalog permission, in catalog order."""
        return {p: self.permission_status(subject, p) for p in self._catalog}
