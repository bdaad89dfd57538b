"""Repository ports."""

from staffperm.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from staffperm.application.ports.repositories.role_repository import RoleRepository
from staffperm.application.ports.repositories.subject_repository import (
    SubjectRepository,
)

__all__ = [
    "OverrideRepository",
    "RoleRepository",
    "SubjectRepository",
]
