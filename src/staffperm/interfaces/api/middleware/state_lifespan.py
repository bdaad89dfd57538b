"""State lifespan middleware - opens the pool and loads permission state."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from staffperm.application.use_cases.state.load_permission_state import (
    LoadPermissionStateUseCase,
)


class StateLifespanMiddleware:
    """Opens the connection pool and loads roles/overrides on startup."""

    def __init__(
        self, pool: AsyncConnectionPool, load_state: LoadPermissionStateUseCase
    ) -> None:
        self._pool = pool
        self._load_state = load_state

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool and populate in-memory state when ASGI server starts."""
        await self._pool.open()
        await self._load_state.execute()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
