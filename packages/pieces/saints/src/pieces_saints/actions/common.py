from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pieces_core.framework import DropdownOption, DropdownState, Property, PropertyDefinition

from ..database import SaintsDatabase
from ..db import MessageContentRepository

logger = logging.getLogger(__name__)


def message_dropdown(database: SaintsDatabase) -> PropertyDefinition:
    """Dropdown of message contents (title -> id), refreshed with the connection."""
    contents = MessageContentRepository()

    async def load(inputs: Mapping[str, Any]) -> DropdownState:
        auth = inputs.get("auth")
        if not auth:
            return DropdownState(options=[], disabled=True)
        async with database.session(auth) as session:
            rows = await contents.list_contents(session)
        logger.debug("Loaded %d message content option(s)", len(rows))
        return DropdownState(
            options=[DropdownOption(label=row.title, value=row.id) for row in rows]
        )

    return Property.dropdown(
        "Message",
        description="Select message to send",
        required=True,
        options_loader=load,
        refreshers=["auth"],
    )
