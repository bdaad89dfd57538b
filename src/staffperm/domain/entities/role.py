"""Role entity for RBAC."""

from dataclasses import dataclass, field

from staffperm.domain.value_objects import Permission


@dataclass(frozen=True)
class Role:
    """Role - named bundle of default permissions."""

    name: str
    permissions: frozenset[Permission] = field(default_factory=frozenset)
