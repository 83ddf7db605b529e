"""
PostgreSQL connection configuration and async session handling.

The host stores the connection as a flat dict of auth props; this module
turns it into an ``AsyncEngine`` on the psycopg driver::

    config = PostgresConnectionConfig.from_auth(context.auth)
    async with session_scope(config) as session:
        ...
"""

from __future__ import annotations

import atexit
import contextlib
import logging
import os
import tempfile
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy import URL, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .exceptions import ConnectionCheckError

logger = logging.getLogger(__name__)

DEFAULT_DRIVER = "postgresql+psycopg"


@dataclass(frozen=True)
class PostgresConnectionConfig:
    """Connection settings for a PostgreSQL server.

    Attributes:
        host: Server hostname.
        port: Server port.
        user: Role to authenticate as.
        password: Password for ``user``.
        database: Database name.
        enable_ssl: Connect over TLS.
        reject_unauthorized: Verify the server certificate (and hostname).
        certificate: PEM encoded CA certificate used for verification.
    """

    host: str
    user: str
    password: str
    database: str
    port: int = 5432
    enable_ssl: bool = True
    reject_unauthorized: bool = False
    certificate: str | None = None
    driver: str = DEFAULT_DRIVER

    @classmethod
    def from_auth(cls, auth: Mapping[str, Any]) -> PostgresConnectionConfig:
        return cls(
            host=auth["host"],
            port=int(auth.get("port") or 5432),
            user=auth["user"],
            password=auth["password"],
            database=auth["database"],
            enable_ssl=bool(auth.get("enable_ssl", True)),
            reject_unauthorized=bool(auth.get("reject_unauthorized", False)),
            certificate=auth.get("certificate") or None,
        )

    @property
    def url(self) -> URL:
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    @property
    def sslmode(self) -> str:
        if not self.enable_ssl:
            return "disable"
        if self.reject_unauthorized:
            return "verify-full"
        return "require"

    def connect_args(self) -> dict[str, Any]:
        """libpq connection parameters passed through to psycopg."""
        args: dict[str, Any] = {"sslmode": self.sslmode}
        if self.enable_ssl and self.reject_unauthorized and self.certificate:
            args["sslrootcert"] = str(_certificate_file(self.certificate))
        return args


_ca_files: dict[str, Path] = {}


def _certificate_file(pem: str) -> Path:
    """Write *pem* to a private temp file libpq can read.

    Files are created with ``mkstemp`` (owner-only, unpredictable name)
    and reused for the same PEM within this process only.
    """
    path = _ca_files.get(pem)
    if path is not None and path.exists():
        return path
    fd, name = tempfile.mkstemp(prefix="pieces-pg-ca-", suffix=".pem")
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(pem)
    path = Path(name)
    _ca_files[pem] = path
    atexit.register(path.unlink, missing_ok=True)
    return path


def create_engine(config: PostgresConnectionConfig, **kwargs: Any) -> AsyncEngine:
    return create_async_engine(
        config.url, connect_args=config.connect_args(), **kwargs
    )


@contextlib.asynccontextmanager
async def session_scope(
    config: PostgresConnectionConfig | None = None,
    *,
    engine: AsyncEngine | None = None,
) -> AsyncIterator[AsyncSession]:
    """
    Yield a session bound to a fresh engine (or the given one).

    Commits when the block exits cleanly, rolls back on error. An engine
    created here is disposed on exit; a passed-in engine is left open.
    """
    if engine is None and config is None:
        raise ValueError("Provide either 'config' or 'engine'")
    owns_engine = engine is None
    bound = engine if engine is not None else create_engine(config)  # type: ignore[arg-type]
    session_factory = async_sessionmaker(bound, expire_on_commit=False)
    try:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        if owns_engine:
            await bound.dispose()


async def check_connection(
    config: PostgresConnectionConfig | None = None,
    *,
    engine: AsyncEngine | None = None,
) -> None:
    """
    Open a connection and run ``SELECT 1``.

    Raises:
        ConnectionCheckError: If the server cannot be reached or rejects us.
    """
    owns_engine = engine is None
    bound = engine if engine is not None else create_engine(config)  # type: ignore[arg-type]
    try:
        async with bound.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("Connection check failed: %s", exc)
        raise ConnectionCheckError(str(exc)) from exc
    finally:
        if owns_engine:
            await bound.dispose()
