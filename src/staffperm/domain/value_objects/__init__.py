"""Domain value objects."""

from staffperm.domain.value_objects.permission import PERMISSION_LABELS, Permission
from staffperm.domain.value_objects.permission_status import PermissionStatus

__all__ = [
    "PERMISSION_LABELS",
    "Permission",
    "PermissionStatus",
]
