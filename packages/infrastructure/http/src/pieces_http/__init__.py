"""pieces-http — outbound HTTP for pieces, built on httpx."""

from __future__ import annotations

from .client import HttpClient, http_client
from .custom_api_call import create_custom_api_call_action
from .exceptions import HttpError, MissingAccessTokenError
from .helpers import get_access_token_or_throw, is_absolute_url, join_base_url
from .models import HttpMethod, HttpRequest, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "MissingAccessTokenError",
    "create_custom_api_call_action",
    "get_access_token_or_throw",
    "http_client",
    "is_absolute_url",
    "join_base_url",
]
