"""Shared fixtures for MailerLite piece tests."""

from __future__ import annotations

import json

import httpx
import pytest

from pieces_core import InMemoryStore, TriggerContext
from pieces_http import HttpClient
from pieces_mailerlite import MailerLiteClient, MailerLiteConfig, build_piece


class FakeMailerLite:
    """``MockTransport`` handler emulating the webhook endpoints."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.fail_with: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "Unauthenticated."})
        if request.method == "POST" and request.url.path.endswith("/webhooks"):
            payload = json.loads(request.content)
            return httpx.Response(
                201, json={"data": {"id": "wh-1", "enabled": True, **payload}}
            )
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def api() -> FakeMailerLite:
    return FakeMailerLite()


@pytest.fixture
def http(api: FakeMailerLite) -> HttpClient:
    return HttpClient(transport=httpx.MockTransport(api))


@pytest.fixture
def piece(http: HttpClient):
    return build_piece(
        client_factory=lambda key: MailerLiteClient(MailerLiteConfig(api_key=key), http=http),
        http=http,
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def context(store: InMemoryStore) -> TriggerContext:
    return TriggerContext(
        auth="ml-key",
        props_value={"name": "My hook"},
        store=store,
        webhook_url="https://flows.example.com/webhooks/abc",
    )
