"""Postgres repositories parse stored rows through the catalog they are given."""

import pytest

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.exceptions import InvalidPermission
from staffperm.domain.value_objects import Permission
from staffperm.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
)
from staffperm.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class FakeCursor:
    def __init__(self, rows: list[tuple]) -> None:
        self._rows = rows

    async def fetchall(self) -> list[tuple]:
        return self._rows


class FakeConnection:
    """Returns canned rows for every query and records executed SQL."""

    def __init__(self, rows: list[tuple]) -> None:
        self._rows = rows
        self.executed: list[tuple[str, object]] = []

    async def execute(self, query: str, params=None) -> FakeCursor:
        self.executed.append((query, params))
        return FakeCursor(self._rows)


NARROW = PermissionCatalog([Permission.CREATE_NEWS, Permission.VIEW_REPORTS])


@pytest.mark.asyncio
async def test_role_rows_are_parsed_with_injected_catalog() -> None:
    conn = FakeConnection([("Lead", ["CREATE_NEWS", "VIEW_REPORTS"]), ("Empty", [])])

    roles = await PostgresRoleRepository(conn, NARROW).list_all()

    assert [(r.name, r.permissions) for r in roles] == [
        ("Lead", {Permission.CREATE_NEWS, Permission.VIEW_REPORTS}),
        ("Empty", frozenset()),
    ]


@pytest.mark.asyncio
async def test_role_row_outside_injected_catalog_is_rejected() -> None:
    conn = FakeConnection([("Lead", ["CREATE_NEWS", "MANAGE_BADGES"])])

    with pytest.raises(InvalidPermission, match="MANAGE_BADGES"):
        await PostgresRoleRepository(conn, NARROW).list_all()


@pytest.mark.asyncio
async def test_override_row_outside_injected_catalog_is_rejected() -> None:
    conn = FakeConnection([("s1", ["MANAGE_TICKETS"], None, None)])

    with pytest.raises(InvalidPermission, match="MANAGE_TICKETS"):
        await PostgresOverrideRepository(conn, NARROW).list_all()


@pytest.mark.asyncio
async def test_empty_override_row_is_explicit_empty_set() -> None:
    conn = FakeConnection([("s1", [], None, "admin-1")])

    [override] = await PostgresOverrideRepository(conn, NARROW).list_all()

    assert override.subject_id == "s1"
    assert override.permissions == frozenset()
    assert override.updated_by == "admin-1"
