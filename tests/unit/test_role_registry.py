"""Unit tests for InMemoryRoleRegistry."""

import pytest

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.exceptions import InvalidPermission, NotFound
from staffperm.domain.value_objects import Permission
from staffperm.infrastructure.memory.role_registry import InMemoryRoleRegistry

from tests.conftest import MANAGER_DEFAULTS


def test_get_defaults_known_role(roles: InMemoryRoleRegistry) -> None:
    assert roles.get_defaults("Manager") == MANAGER_DEFAULTS


def test_get_defaults_unknown_role_is_empty(roles: InMemoryRoleRegistry) -> None:
    assert roles.get_defaults("Ghost") == frozenset()


def test_role_names_are_case_sensitive(roles: InMemoryRoleRegistry) -> None:
    assert roles.get_defaults("manager") == frozenset()
    assert not roles.has_role("MANAGER")


def test_strict_registry_raises_for_unknown_role(catalog: PermissionCatalog) -> None:
    registry = InMemoryRoleRegistry(catalog, strict=True)
    with pytest.raises(NotFound, match="Ghost"):
        registry.get_defaults("Ghost")


def test_set_defaults_replaces_wholesale(roles: InMemoryRoleRegistry) -> None:
    roles.set_defaults("Manager", ["MANAGE_SURVEYS"])
    assert roles.get_defaults("Manager") == {Permission.MANAGE_SURVEYS}


def test_set_defaults_creates_role(roles: InMemoryRoleRegistry) -> None:
    roles.set_defaults("Intern", [])
    assert roles.has_role("Intern")
    assert roles.list_roles()[-1] == "Intern"


def test_set_defaults_invalid_leaves_state_unchanged(roles: InMemoryRoleRegistry) -> None:
    with pytest.raises(InvalidPermission):
        roles.set_defaults("Manager", ["MANAGE_SURVEYS", "NOT_A_PERMISSION"])
    assert roles.get_defaults("Manager") == MANAGER_DEFAULTS


def test_list_roles_insertion_order(roles: InMemoryRoleRegistry) -> None:
    assert roles.list_roles() == ["Manager", "Employee", "Admin"]
    roles.set_defaults("Manager", [])
    assert roles.list_roles() == ["Manager", "Employee", "Admin"]


def test_load_invalid_keeps_previous_state(roles: InMemoryRoleRegistry) -> None:
    with pytest.raises(InvalidPermission):
        roles.load({"Other": ["VIEW_REPORTS"], "Broken": ["REMOVED_PERMISSION"]})
    assert roles.list_roles() == ["Manager", "Employee", "Admin"]


def test_load_replaces_all_roles(roles: InMemoryRoleRegistry) -> None:
    roles.load({"Only": [Permission.CREATE_NEWS]})
    assert roles.list_roles() == ["Only"]
    assert roles.get_defaults("Manager") == frozenset()
