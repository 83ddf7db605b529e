from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from pieces_sqlalchemy import RepositoryError, SQLAlchemyFilterRepository

from .models import MessageContentModel, UserModel, messages_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class UserRepository(SQLAlchemyFilterRepository[UserModel]):
    def __init__(self) -> None:
        super().__init__(UserModel)


class MessageContentRepository(SQLAlchemyFilterRepository[MessageContentModel]):
    def __init__(self) -> None:
        super().__init__(MessageContentModel)

    async def list_contents(self, session: AsyncSession) -> list[MessageContentModel]:
        return await self.list_all(session, MessageContentModel.id)


class MessageRepository:
    """Writes rows to ``saints_messages``."""

    async def queue_for_users(
        self,
        session: AsyncSession,
        user_ids: Sequence[int],
        content_id: int,
        campaign_id: str | None,
    ) -> int:
        """Insert one undelivered, unread message per user id."""
        if not user_ids:
            return 0
        created_at = datetime.now(timezone.utc)
        rows: list[dict[str, Any]] = [
            {
                "user_id": user_id,
                "content_id": content_id,
                "created_at": created_at,
                "delivered_at": None,
                "readed_at": None,
                "campaign_id": campaign_id,
            }
            for user_id in user_ids
        ]
        try:
            await session.execute(insert(messages_table), rows)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Inserting into saints_messages failed: {exc}") from exc
        logger.info(
            "Queued message %s for %d user(s) (campaign=%s)",
            content_id,
            len(rows),
            campaign_id,
        )
        return len(rows)
