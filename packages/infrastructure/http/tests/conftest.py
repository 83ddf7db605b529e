"""Shared fixtures for HTTP tests."""

from __future__ import annotations

import httpx
import pytest

from pieces_http import HttpClient


class Recorder:
    """Collects requests seen by a ``MockTransport`` and replies with a fixed response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.json: object = {"ok": True}
        self.text: str | None = None
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> HttpClient:
    return HttpClient(transport=httpx.MockTransport(recorder))
