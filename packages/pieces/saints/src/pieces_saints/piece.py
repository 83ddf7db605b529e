from __future__ import annotations

from pieces_core.framework import Piece, create_piece
from pieces_http import HttpClient

from .actions import build_filter_user, build_run_campaign, build_send_in_app_messages
from .auth import build_postgres_auth
from .database import SaintsDatabase


def build_piece(
    *,
    database: SaintsDatabase | None = None,
    client: HttpClient | None = None,
) -> Piece:
    """Assemble the piece; tests pass a SQLite-backed ``database``."""
    auth = build_postgres_auth(database)
    return create_piece(
        display_name="Saints",
        auth=auth,
        minimum_supported_release="0.36.1",
        actions=[
            build_filter_user(auth, database),
            build_run_campaign(auth, database, client),
            build_send_in_app_messages(auth, database),
        ],
    )


saints = build_piece()
