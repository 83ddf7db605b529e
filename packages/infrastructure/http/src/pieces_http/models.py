"""Request / response value objects for outbound HTTP calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


@dataclass(frozen=True)
class HttpRequest:
    """
    One outbound call.

    Attributes:
        timeout: Milliseconds; ``0`` or ``None`` disables the timeout.
        body: Sent as JSON for mappings and lists, as raw content otherwise.
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: int | None = None

    @property
    def timeout_seconds(self) -> float | None:
        if not self.timeout:
            return None
        return self.timeout / 1000

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "query_params": dict(self.query_params),
            "body": self.body,
        }


@dataclass(frozen=True)
class HttpResponse:
    """
    A received response.

    ``body`` is the JSON-decoded payload when the content parses as JSON;
    ``text`` always holds the undecoded content.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    text: str = field(default="", repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.status < 400

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "headers": dict(self.headers), "body": self.body}
