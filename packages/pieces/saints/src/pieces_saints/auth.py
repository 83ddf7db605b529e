from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pieces_core.framework import AuthValidation, CustomAuth, Property
from pieces_sqlalchemy import ConnectionCheckError

from .database import SaintsDatabase, default_database

POSTGRES_PROPS = {
    "host": Property.short_text(
        "Host",
        required=True,
        description="A string indicating the hostname of the PostgreSQL server to connect to.",
    ),
    "port": Property.number(
        "Port",
        required=True,
        default_value=5432,
        description="An integer indicating the port of the PostgreSQL server to connect to.",
    ),
    "user": Property.short_text(
        "User",
        required=True,
        description=(
            "A string indicating the user to authenticate as when connecting "
            "to the PostgreSQL server."
        ),
    ),
    "password": Property.secret_text(
        "Password",
        required=True,
        description="A string indicating the password to use for authentication.",
    ),
    "database": Property.short_text(
        "Database",
        required=True,
        description="A string indicating the name of the database to connect to.",
    ),
    "enable_ssl": Property.checkbox(
        "Enable SSL",
        required=True,
        default_value=True,
        description="Connect to the postgres database over SSL",
    ),
    "reject_unauthorized": Property.checkbox(
        "Verify server certificate",
        required=True,
        default_value=False,
        description=(
            "Verify the server certificate against trusted CAs or a CA provided "
            "in the certificate field below. This will fail if the database "
            "server is using a self signed certificate."
        ),
    ),
    "certificate": Property.long_text(
        "Certificate",
        default_value="",
        description="The CA certificate to use for verification of server certificate.",
    ),
}


def build_postgres_auth(database: SaintsDatabase | None = None) -> CustomAuth:
    db = database or default_database

    async def validate(auth: Mapping[str, Any]) -> AuthValidation:
        try:
            await db.check(auth)
        except ConnectionCheckError as exc:
            return AuthValidation(valid=False, error=str(exc))
        return AuthValidation(valid=True)

    return CustomAuth(props=POSTGRES_PROPS, required=True, validate=validate)


postgres_auth = build_postgres_auth()
