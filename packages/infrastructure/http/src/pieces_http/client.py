"""Async HTTP client used by pieces for outbound API calls."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pieces_core.correlation import get_correlation_id

from .exceptions import HttpError
from .models import HttpMethod, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "pieces-http/0.1.0"


class HttpClient:
    """
    Thin wrapper around ``httpx.AsyncClient``.

    Responses are decoded as JSON when possible and fall back to text.
    Status codes >= 400 raise :class:`HttpError`; so do transport errors.
    Requests carry ``X-Correlation-ID`` when a correlation id is set.

    ``transport`` lets callers (and tests) substitute an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._transport = transport
        self.user_agent = user_agent

    async def send_request(self, request: HttpRequest) -> HttpResponse:
        headers = {"User-Agent": self.user_agent, **request.headers}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers.setdefault("X-Correlation-ID", correlation_id)

        logger.debug("%s %s", request.method.value, request.url)
        try:
            async with httpx.AsyncClient(
                timeout=request.timeout_seconds, transport=self._transport
            ) as client:
                raw = await client.request(
                    request.method.value,
                    request.url,
                    headers=headers,
                    params=request.query_params or None,
                    **_body_kwargs(request),
                )
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", request.method.value, request.url, exc)
            raise HttpError(request, reason=str(exc)) from exc

        response = HttpResponse(
            status=raw.status_code,
            headers=dict(raw.headers),
            body=_decode_body(raw),
            text=raw.text,
        )
        if not response.ok:
            logger.error(
                "%s %s returned %d", request.method.value, request.url, response.status
            )
            raise HttpError(request, response)
        return response


def _body_kwargs(request: HttpRequest) -> dict[str, Any]:
    if request.body is None or request.method == HttpMethod.HEAD:
        return {}
    if isinstance(request.body, Mapping | list):
        return {"json": request.body}
    if isinstance(request.body, bytes):
        return {"content": request.body}
    return {"content": str(request.body)}


def _decode_body(raw: httpx.Response) -> Any:
    if not raw.content:
        return None
    try:
        return raw.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return raw.text


http_client = HttpClient()
