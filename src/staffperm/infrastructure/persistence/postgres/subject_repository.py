"""PostgreSQL subject repository implementation."""

from psycopg import AsyncConnection

from staffperm.domain.entities import Subject


class PostgresSubjectRepository:
    """Subject repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[Subject]:
        """List all subjects."""
        cur = await self._conn.execute("SELECT id, role_name FROM subject")
        rows = await cur.fetchall()
        return [Subject(id=r[0], role=r[1]) for r in rows]

    async def update_role(self, subject_id: str, role_name: str) -> None:
        """Point subject at another role."""
        await self._conn.execute(
            "UPDATE subject SET role_name = %s WHERE id = %s",
            (role_name, subject_id),
        )
