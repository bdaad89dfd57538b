"""Pytest fixtures for staffperm tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.entities import Override, Role, Subject
from staffperm.domain.value_objects import Permission
from staffperm.infrastructure.memory.override_store import InMemoryOverrideStore
from staffperm.infrastructure.memory.role_registry import InMemoryRoleRegistry
from staffperm.infrastructure.memory.subject_directory import InMemorySubjectDirectory
from staffperm.infrastructure.permission.permission_resolver import PermissionResolver


MANAGER_DEFAULTS = frozenset({Permission.VIEW_REPORTS, Permission.MANAGE_EMPLOYEES})


# --- Fake repositories ---


class PersistenceFailure(RuntimeError):
    """Raised by fake repositories configured to fail."""


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_name: dict[str, Role] = {}
        self.fail = False

    async def list_all(self) -> list[Role]:
        return list(self._by_name.values())

    async def save(self, role: Role) -> None:
        if self.fail:
            raise PersistenceFailure("role write failed")
        self._by_name[role.name] = role


class FakeOverrideRepository:
    """In-memory override repository."""

    def __init__(self) -> None:
        self._by_subject: dict[str, Override] = {}
        self.fail = False

    async def get(self, subject_id: str) -> Override | None:
        """Helper to inspect stored override in tests."""
        return self._by_subject.get(subject_id)

    async def list_all(self) -> list[Override]:
        return list(self._by_subject.values())

    async def save(self, override: Override) -> None:
        if self.fail:
            raise PersistenceFailure("override write failed")
        self._by_subject[override.subject_id] = override

    async def delete(self, subject_id: str) -> None:
        if self.fail:
            raise PersistenceFailure("override delete failed")
        self._by_subject.pop(subject_id, None)


class FakeSubjectRepository:
    """In-memory subject repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Subject] = {}
        self.fail = False

    async def get(self, subject_id: str) -> Subject | None:
        """Helper to inspect stored subject in tests."""
        return self._by_id.get(subject_id)

    async def list_all(self) -> list[Subject]:
        return list(self._by_id.values())

    async def update_role(self, subject_id: str, role_name: str) -> None:
        if self.fail:
            raise PersistenceFailure("subject write failed")
        self._by_id[subject_id] = Subject(id=subject_id, role=role_name)

    def add(self, subject: Subject) -> None:
        """Helper to add subject for tests."""
        self._by_id[subject.id] = subject


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.overrides = FakeOverrideRepository()
        self.subjects = FakeSubjectRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork, commit_delay: float = 0):
    """Factory yielding the same FakeUnitOfWork, committing on clean exit.

    A non-zero commit_delay suspends before the commit, letting other tasks
    run while the transaction is open.
    """

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        if commit_delay:
            await asyncio.sleep(commit_delay)
        await uow.commit()

    return _factory


# --- Fixtures ---


@pytest.fixture
def catalog() -> PermissionCatalog:
    return PermissionCatalog()


@pytest.fixture
def roles(catalog: PermissionCatalog) -> InMemoryRoleRegistry:
    """Registry with Manager, Employee and Admin roles."""
    registry = InMemoryRoleRegistry(catalog)
    registry.load({
        "Manager": MANAGER_DEFAULTS,
        "Employee": [],
        "Admin": [Permission.MANAGE_SETTINGS],
    })
    return registry


@pytest.fixture
def overrides(catalog: PermissionCatalog) -> InMemoryOverrideStore:
    return InMemoryOverrideStore(catalog)


@pytest.fixture
def admin() -> Subject:
    return Subject(id="admin-1", role="Admin")


@pytest.fixture
def manager() -> Subject:
    return Subject(id="E1", role="Manager")


@pytest.fixture
def subjects(admin: Subject, manager: Subject) -> InMemorySubjectDirectory:
    return InMemorySubjectDirectory([
        admin,
        manager,
        Subject(id="E2", role="Manager"),
        Subject(id="E3", role="Employee"),
    ])


@pytest.fixture
def resolver(
    roles: InMemoryRoleRegistry,
    overrides: InMemoryOverrideStore,
    catalog: PermissionCatalog,
) -> PermissionResolver:
    return PermissionResolver(roles, overrides, catalog)


@pytest.fixture
def fake_uow(subjects: InMemorySubjectDirectory) -> FakeUnitOfWork:
    """UnitOfWork whose subject table mirrors the directory fixture."""
    uow = FakeUnitOfWork()
    for sid in ("admin-1", "E1", "E2", "E3"):
        uow.subjects.add(subjects.get(sid))
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    return make_uow_factory(fake_uow)


@pytest.fixture
def state_lock() -> asyncio.Lock:
    return asyncio.Lock()


@pytest.fixture
def admin_deps(uow_factory, resolver, roles, overrides, subjects, catalog, state_lock) -> dict:
    """Constructor arguments shared by administration use cases."""
    return dict(
        unit_of_work_factory=uow_factory,
        permission_checker=resolver,
        roles=roles,
        overrides=overrides,
        subjects=subjects,
        catalog=catalog,
        state_lock=state_lock,
    )
