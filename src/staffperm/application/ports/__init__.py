"""Application ports - interfaces for external adapters."""

from staffperm.application.ports.override_store import OverrideStore
from staffperm.application.ports.permission_checker import PermissionChecker
from staffperm.application.ports.role_registry import RoleRegistry
from staffperm.application.ports.subject_directory import SubjectDirectory
from staffperm.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "OverrideStore",
    "PermissionChecker",
    "RoleRegistry",
    "SubjectDirectory",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
