"""Minimal MailerLite API client covering webhook management."""

from __future__ import annotations

import logging
from typing import Any

from pieces_http import (
    HttpClient,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    http_client,
    join_base_url,
)

from .config import MailerLiteConfig

logger = logging.getLogger(__name__)


class MailerLiteClient:
    def __init__(self, config: MailerLiteConfig, *, http: HttpClient | None = None) -> None:
        self.config = config
        self._http = http or http_client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }

    async def create_webhook(self, name: str, events: list[str], url: str) -> dict[str, Any]:
        """Register a webhook; returns the API response body (``{"data": {...}}``)."""
        response = await self._send(
            HttpMethod.POST, "/webhooks", body={"name": name, "events": events, "url": url}
        )
        logger.info("Created MailerLite webhook %r for %s", name, ", ".join(events))
        return dict(response.body or {})

    async def delete_webhook(self, webhook_id: str) -> None:
        await self._send(HttpMethod.DELETE, f"/webhooks/{webhook_id}")
        logger.info("Deleted MailerLite webhook %s", webhook_id)

    async def _send(self, method: HttpMethod, path: str, body: Any = None) -> HttpResponse:
        return await self._http.send_request(
            HttpRequest(
                method=method,
                url=join_base_url(self.config.base_url, path),
                headers=self.headers,
                body=body,
                timeout=int(self.config.timeout * 1000),
            )
        )
