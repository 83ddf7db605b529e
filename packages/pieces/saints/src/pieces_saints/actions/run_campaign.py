from __future__ import annotations

import logging
from typing import Any

from pieces_conditions import FilterCondition, FilterOperator
from pieces_core.framework import (
    Action,
    ActionContext,
    DropdownOption,
    PieceAuth,
    Property,
    create_action,
)
from pieces_http import HttpClient, HttpError, HttpMethod, HttpRequest, http_client

from ..database import SaintsDatabase, default_database
from ..schema import USER_SCHEMA, user_translator
from .common import message_dropdown

logger = logging.getLogger(__name__)


def _runner_filter(condition: FilterCondition) -> dict[str, Any]:
    entry = condition.to_dict()
    return {"column": entry.pop("field"), **entry}


def build_run_campaign(
    auth: PieceAuth,
    database: SaintsDatabase | None = None,
    client: HttpClient | None = None,
) -> Action:
    db = database or default_database
    sender = client or http_client

    async def run(context: ActionContext) -> str:
        values = context.props_value
        conditions = user_translator.parse(values["filters"])
        request = HttpRequest(
            method=HttpMethod.POST,
            url=values["campaignRunnerUrl"],
            headers={"Content-Type": "application/json"},
            body={
                "filters": [_runner_filter(c) for c in conditions],
                "messageId": values["messageId"],
                "campaignId": context.run.id,
                "page": 1,
            },
        )
        try:
            await sender.send_request(request)
        except HttpError as exc:
            if exc.response is None:
                raise
            logger.warning("Campaign runner rejected campaign %s", context.run.id)
            return exc.response.text
        logger.info("Launched campaign %s with %d filter(s)", context.run.id, len(conditions))
        return f"Campaign launched successfully (id: {context.run.id})"

    filter_item = {
        "column": Property.static_dropdown(
            "Column",
            required=True,
            options=[DropdownOption(label=name, value=name) for name in USER_SCHEMA.field_names],
        ),
        "operator": Property.static_dropdown(
            "Operator",
            required=True,
            options=[DropdownOption(label=op.value, value=op.value) for op in FilterOperator],
        ),
        "value": Property.short_text("Value"),
    }

    return create_action(
        name="runCampaign",
        display_name="Run campaign",
        description="Define and run a user communication campaign",
        run=run,
        auth=auth,
        props={
            "filters": Property.array(
                "Filters",
                description="Array of filter conditions",
                default_value=[],
                properties=filter_item,
            ),
            "messageId": message_dropdown(db),
            "campaignRunnerUrl": Property.short_text("Campaign runner url", required=True),
        },
    )
