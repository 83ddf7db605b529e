"""Table definitions for the campaign database."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    func,
    inspect,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class UserModel(Base):
    __tablename__ = "saints_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(Text, nullable=False)
    track_accepted_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    notifications_accepted_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, server_default=func.now()
    )
    platform: Mapped[str | None] = mapped_column(String(10), nullable=True)
    last_ip: Mapped[str | None] = mapped_column(String(40), nullable=True)
    last_location: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_dict(self) -> dict[str, Any]:
        """Row as a JSON-compatible dict keyed by camelCase attribute name."""
        return {
            _camel(attr.key): _jsonable(getattr(self, attr.key))
            for attr in inspect(type(self)).column_attrs
        }


class MessageContentModel(Base):
    __tablename__ = "saints_messages_content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    file_name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, server_default=func.now()
    )


# No primary key in the deployed schema, so messages are a Core table
# written with bulk INSERTs rather than mapped objects.
messages_table = Table(
    "saints_messages",
    Base.metadata,
    Column("user_id", Integer, nullable=False),
    Column(
        "content_id",
        Integer,
        ForeignKey("saints_messages_content.id"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("delivered_at", DateTime(timezone=True), nullable=True),
    Column("readed_at", DateTime(timezone=True), nullable=True),
    Column("campaign_id", Text, nullable=True),
)
