from __future__ import annotations

from collections.abc import Mapping

from pieces_core.framework import Action, ActionContext, PieceAuth, Property, create_action
from pieces_core.primitives.exceptions import ValidationError

from ..database import SaintsDatabase, default_database
from ..db import MessageRepository
from .common import message_dropdown


def _as_id(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def _user_ids(users: object) -> list[int]:
    if not isinstance(users, list):
        raise ValidationError({"users": ["Expected an array of users"]})
    ids: list[int] = []
    for index, user in enumerate(users):
        if not isinstance(user, Mapping) or user.get("id") is None:
            raise ValidationError({f"users[{index}]": ["User must have an id"]})
        user_id = _as_id(user["id"])
        if user_id is None:
            raise ValidationError({f"users[{index}].id": ["User id must be an integer"]})
        ids.append(user_id)
    return ids


def _content_id(value: object) -> int:
    content_id = _as_id(value)
    if content_id is None:
        raise ValidationError({"messageId": ["Message id must be an integer"]})
    return content_id


def build_send_in_app_messages(
    auth: PieceAuth, database: SaintsDatabase | None = None
) -> Action:
    db = database or default_database
    messages = MessageRepository()

    async def run(context: ActionContext) -> int:
        values = context.props_value
        user_ids = _user_ids(values["users"])
        content_id = _content_id(values["messageId"])
        if not user_ids:
            return 0
        async with db.session(context.auth) as session:
            return await messages.queue_for_users(
                session,
                user_ids,
                content_id=content_id,
                campaign_id=values["campaignId"],
            )

    return create_action(
        name="sendInAppMessages",
        display_name="Send in-app messages",
        description="Send in-app messages to multiple users",
        run=run,
        auth=auth,
        props={
            "users": Property.json(
                "Users", required=True, description="Array of users to send the message"
            ),
            "messageId": message_dropdown(db),
            "campaignId": Property.short_text("Campaign id", required=True),
        },
    )
