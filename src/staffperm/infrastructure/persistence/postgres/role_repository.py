"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from staffperm.domain.catalog import PermissionCatalog
from staffperm.domain.entities import Role


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection, catalog: PermissionCatalog) -> None:
        self._conn = conn
        self._catalog = catalog

    async def list_all(self) -> list[Role]:
        """List all roles in creation order with their default permissions."""
        cur = await self._conn.execute(
            "SELECT r.name, COALESCE(array_agg(rp.permission) "
            "FILTER (WHERE rp.permission IS NOT NULL), '{}') "
            "FROM role r LEFT JOIN role_permission rp ON rp.role_name = r.name "
            "GROUP BY r.name, r.position ORDER BY r.position"
        )
        rows = await cur.fetchall()
        return [
            Role(name=r[0], permissions=self._catalog.parse_many(r[1]))
            for r in rows
        ]

    async def save(self, role: Role) -> None:
        """Create role or replace its default permissions."""
        await self._conn.execute(
            "INSERT INTO role (name) VALUES (%s) ON CONFLICT (name) DO NOTHING",
            (role.name,),
        )
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_name = %s",
            (role.name,),
        )
        if role.permissions:
            await self._conn.execute(
                "INSERT INTO role_permission (role_name, permission) "
                "SELECT %s, unnest(%s::text[])",
                (role.name, sorted(p.value for p in role.permissions)),
            )
