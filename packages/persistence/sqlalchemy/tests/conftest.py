"""Shared fixtures for SQLAlchemy adapter tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import datetime

import pytest
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pieces_conditions import ConditionTranslator, FieldKind, FieldRule, RecordSchema


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    platform: Mapped[str | None] = mapped_column(String, nullable=True)
    last_ip: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)


USERS = RecordSchema(
    name="users",
    fields=[
        FieldRule("id", FieldKind.NUMBER),
        FieldRule("name", FieldKind.STRING),
        FieldRule("platform", FieldKind.ENUM, choices=("ios", "android")),
        FieldRule("last_ip", FieldKind.STRING, aliases=("lastIp",)),
        FieldRule("created_at", FieldKind.DATE, aliases=("createdAt",)),
    ],
)


@pytest.fixture
def translator() -> ConditionTranslator:
    return ConditionTranslator(USERS)


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add_all(
            [
                UserRow(id=3, name="John Smith", platform="ios", last_ip=None,
                        created_at=datetime(2024, 3, 1)),
                UserRow(id=1, name="Ada Lovelace", platform="android", last_ip="10.0.0.1",
                        created_at=datetime(2024, 1, 1)),
                UserRow(id=2, name="Grace Hopper", platform="ios", last_ip="10.0.0.2",
                        created_at=datetime(2024, 2, 1)),
            ]
        )
        await session.commit()
        yield session


@pytest.fixture
def user_model() -> type[UserRow]:
    return UserRow
