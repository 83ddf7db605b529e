from __future__ import annotations

from typing import Any

from pieces_core.framework import Action, ActionContext, PieceAuth, Property, create_action

from ..database import SaintsDatabase, default_database
from ..db import UserRepository
from ..schema import user_translator


def build_filter_user(auth: PieceAuth, database: SaintsDatabase | None = None) -> Action:
    db = database or default_database
    users = UserRepository()

    async def run(context: ActionContext) -> dict[str, Any]:
        values = context.props_value
        # Validation happens before any connection is opened.
        options = user_translator.query(
            values["filters"],
            page=values["page"],
            page_size=values["usersPerPage"],
        )
        async with db.session(context.auth) as session:
            page = await users.filter(session, options)
        return {
            "users": [user.to_dict() for user in page.records],
            "numberOfUsers": page.count,
            "nextPage": page.next_page,
        }

    return create_action(
        name="filter-user",
        display_name="Filter users",
        description="Filter users with pagination",
        run=run,
        auth=auth,
        props={
            "page": Property.number(
                "Page",
                required=True,
                default_value=1,
                description="Page number for the filter (starts at 1)",
            ),
            "usersPerPage": Property.number(
                "Users per page",
                required=True,
                default_value=100,
                description="Number of users per page",
            ),
            "filters": Property.array(
                "Filters",
                default_value=[],
                description=(
                    "Array of filter conditions. The type is: "
                    "`{ field: string; operator: string; value: any }[]`"
                ),
            ),
        },
    )
