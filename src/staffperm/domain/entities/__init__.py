"""Domain entities."""

from staffperm.domain.entities.override import Override
from staffperm.domain.entities.role import Role
from staffperm.domain.entities.subject import Subject

__all__ = [
    "Override",
    "Role",
    "Subject",
]
