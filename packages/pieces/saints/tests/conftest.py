"""Shared fixtures for the campaign piece tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime, timezone

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from pieces_http import HttpClient
from pieces_saints import SaintsDatabase, build_piece
from pieces_saints.db import Base, MessageContentModel, UserModel

AUTH = {
    "host": "localhost",
    "port": 5432,
    "user": "saints",
    "password": "secret",
    "database": "saints",
}


@pytest.fixture
def auth() -> dict:
    return dict(AUTH)


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [
                UserModel(id=3, device_id="dev-3", platform="ios", last_ip=None,
                          created_at=datetime(2024, 3, 1, tzinfo=timezone.utc)),
                UserModel(id=1, device_id="dev-1", platform="android", last_ip="10.0.0.1",
                          created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
                UserModel(id=2, device_id="dev-2", platform="ios", last_ip="10.0.0.2",
                          last_location="Lisbon",
                          created_at=datetime(2024, 2, 1, tzinfo=timezone.utc)),
                MessageContentModel(id=1, title="Welcome", file_name="welcome.html"),
                MessageContentModel(id=2, title="Promo", file_name="promo.html"),
            ]
        )
        await session.commit()
    yield engine
    await engine.dispose()


class Runner:
    """``MockTransport`` handler standing in for the campaign runner service."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.text = "queued"

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.text)


@pytest.fixture
def runner() -> Runner:
    return Runner()


@pytest.fixture
def database(engine: AsyncEngine) -> SaintsDatabase:
    return SaintsDatabase(engine_factory=lambda _auth: engine)


@pytest.fixture
def piece(database: SaintsDatabase, runner: Runner):
    return build_piece(
        database=database, client=HttpClient(transport=httpx.MockTransport(runner))
    )


@pytest.fixture
def unreachable_piece(runner: Runner):
    """A piece whose database must never be touched."""

    def explode(_auth):
        raise AssertionError("database was reached")

    return build_piece(
        database=SaintsDatabase(engine_factory=explode),
        client=HttpClient(transport=httpx.MockTransport(runner)),
    )
