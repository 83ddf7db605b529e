"""Session handling for the campaign database.

Actions receive a :class:`SaintsDatabase` so the engine can be swapped
(SQLite in tests, PostgreSQL from the connection otherwise).
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from pieces_sqlalchemy import PostgresConnectionConfig, check_connection, session_scope

EngineFactory = Callable[[Mapping[str, Any]], AsyncEngine]


class SaintsDatabase:
    def __init__(self, engine_factory: EngineFactory | None = None) -> None:
        self._engine_factory = engine_factory

    @contextlib.asynccontextmanager
    async def session(self, auth: Mapping[str, Any]) -> AsyncIterator[AsyncSession]:
        if self._engine_factory is None:
            scope = session_scope(PostgresConnectionConfig.from_auth(auth))
        else:
            scope = session_scope(engine=self._engine_factory(auth))
        async with scope as session:
            yield session

    async def check(self, auth: Mapping[str, Any]) -> None:
        """Open and close one connection; raises ``ConnectionCheckError``."""
        if self._engine_factory is None:
            await check_connection(PostgresConnectionConfig.from_auth(auth))
        else:
            await check_connection(engine=self._engine_factory(auth))


default_database = SaintsDatabase()
