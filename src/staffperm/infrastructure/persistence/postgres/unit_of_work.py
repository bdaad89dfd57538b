"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from staffperm.domain.catalog import PermissionCatalog
from staffperm.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
)
from staffperm.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from staffperm.infrastructure.persistence.postgres.subject_repository import (
    PostgresSubjectRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool, catalog: PermissionCatalog) -> None:
        self._pool = pool
        self._catalog = catalog
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn, self._catalog)
        self._overrides = PostgresOverrideRepository(self._conn, self._catalog)
        self._subjects = PostgresSubjectRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def overrides(self) -> PostgresOverrideRepository:
        return self._overrides

    @property
    def subjects(self) -> PostgresSubjectRepository:
        return self._subjects

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool, catalog: PermissionCatalog) -> object:
    """Create UnitOfWork factory (async context manager).

    The transaction commits when the ``async with`` body exits normally, so
    callers may treat the end of the block as "durably stored".
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool, catalog)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
