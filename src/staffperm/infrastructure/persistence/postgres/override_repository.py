"""PostgreSQL override repository implementation."""

from psycopg import AsyncConnection

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.entities import Override


class PostgresOverrideRepository:
    """Override repository implementation.

    A row with an empty array is an explicit "no permissions" override;
    no row means the subject follows its role defaults.
    """

    def __init__(self, conn: AsyncConnection, catalog: PermissionCatalog) -> None:
        self._conn = conn
        self._catalog = catalog

    async def list_all(self) -> list[Override]:
        """List all overrides."""
        cur = await self._conn.execute(
            "SELECT subject_id, permissions, updated_at, updated_by FROM permission_override"
        )
        rows = await cur.fetchall()
        return [
            Override(
                subject_id=r[0],
                permissions=self._catalog.parse_many(r[1]),
                updated_at=r[2],
                updated_by=r[3],
            )
            for r in rows
        ]

    async def save(self, override: Override) -> None:
        """Insert or replace override."""
        await self._conn.execute(
            "INSERT INTO permission_override (subject_id, permissions, updated_at, updated_by) "
            "VALUES (%s, %s::text[], %s, %s) "
            "ON CONFLICT (subject_id) DO UPDATE SET permissions = EXCLUDED.permissions, "
            "updated_at = EXCLUDED.updated_at, updated_by = EXCLUDED.updated_by",
            (
                override.subject_id,
                sorted(p.value for p in override.permissions),
                override.updated_at,
                override.updated_by,
            ),
        )

    async def delete(self, subject_id: str) -> None:
        """Delete override. Deleting a missing override is not an error."""
        await self._conn.execute(
            "DELETE FROM permission_override WHERE subject_id = %s",
            (subject_id,),
        )
