"""Permission checker port - the boolean contract used by feature gates."""

from typing import Protocol

from staffperm.domain.entities import Subject
from staffperm.domain.value_objects import Permission


class PermissionChecker(Protocol):
    """Port for checking a subject's permissions. Never raises."""

    def effective_permissions(self, subject: Subject | None) -> frozenset[Permission]: ...

    def has_permission(self, subject: Subject | None, permission: Permission | str) -> bool: ...
