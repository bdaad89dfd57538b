"""Role registry port - live role defaults."""

from collections.abc import Iterable, Mapping
from typing import Protocol

from staffperm.domain.value_objects import Permission


class RoleRegistry(Protocol):
    """Port for the role name -> default permissions mapping."""

    def get_defaults(self, role_name: str) -> frozenset[Permission]: ...

    def set_defaults(self, role_name: str, permissions: Iterable[Permission | str]) -> None: ...

    def list_roles(self) -> list[str]: ...

    def has_role(self, role_name: str) -> bool: ...

    def load(self, roles: Mapping[str, Iterable[Permission | str]]) -> None: ...
