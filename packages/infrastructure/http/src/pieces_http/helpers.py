from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import MissingAccessTokenError


def get_access_token_or_throw(auth: Mapping[str, Any] | None) -> str:
    """Return the OAuth2 ``access_token`` or raise ``MissingAccessTokenError``."""
    token = auth.get("access_token") if auth is not None else None
    if token is None:
        raise MissingAccessTokenError("Invalid bearer token")
    return str(token)


def join_base_url(base_url: str, relative_path: str) -> str:
    """Join with exactly one slash between the two parts."""
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    path = relative_path[1:] if relative_path.startswith("/") else relative_path
    return f"{base}{path}"


def is_absolute_url(url: str) -> bool:
    return url.startswith(("http://", "https://"))
