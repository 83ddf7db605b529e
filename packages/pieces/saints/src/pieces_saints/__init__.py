"""pieces-saints — user filtering and campaign actions over the campaign database."""

from __future__ import annotations

from .auth import POSTGRES_PROPS, build_postgres_auth, postgres_auth
from .database import EngineFactory, SaintsDatabase, default_database
from .piece import build_piece, saints
from .schema import USER_FIELDS, USER_SCHEMA, user_translator

__all__ = [
    "EngineFactory",
    "POSTGRES_PROPS",
    "SaintsDatabase",
    "USER_FIELDS",
    "USER_SCHEMA",
    "build_piece",
    "build_postgres_auth",
    "default_database",
    "postgres_auth",
    "saints",
    "user_translator",
]
