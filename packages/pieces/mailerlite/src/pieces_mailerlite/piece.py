from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pieces_core.framework import Piece, create_piece
from pieces_http import HttpClient, create_custom_api_call_action

from .auth import mailerlite_auth
from .config import DEFAULT_BASE_URL
from .triggers import ClientFactory, build_triggers


async def _bearer_headers(auth: Any, _props: Mapping[str, Any]) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth}"}


def build_piece(
    *,
    client_factory: ClientFactory | None = None,
    http: HttpClient | None = None,
) -> Piece:
    return create_piece(
        display_name="MailerLite",
        auth=mailerlite_auth,
        actions=[
            create_custom_api_call_action(
                base_url=lambda _auth: DEFAULT_BASE_URL,
                auth=mailerlite_auth,
                auth_mapping=_bearer_headers,
                client=http,
            )
        ],
        triggers=build_triggers(client_factory),
    )


mailerlite = build_piece()
