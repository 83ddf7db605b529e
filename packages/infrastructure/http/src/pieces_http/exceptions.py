"""Exception hierarchy for outbound HTTP calls."""

from __future__ import annotations

from typing import Any

from pieces_core.primitives.exceptions import AuthenticationError, InfrastructureError

from .models import HttpRequest, HttpResponse


class HttpError(InfrastructureError):
    """
    Raised for responses with status >= 400 and for transport failures.

    Transport failures (DNS, refused connection, timeout) carry no
    ``response``; ``status`` is then ``None``.
    """

    def __init__(
        self,
        request: HttpRequest,
        response: HttpResponse | None = None,
        reason: str | None = None,
    ) -> None:
        self.request = request
        self.response = response
        self.reason = reason
        if response is not None:
            message = f"{request.method.value} {request.url} failed with status {response.status}"
        else:
            message = f"{request.method.value} {request.url} failed: {reason}"
        super().__init__(message)

    @property
    def status(self) -> int | None:
        return self.response.status if self.response is not None else None

    def error_message(self) -> dict[str, Any]:
        """Serializable summary returned by fail-safe calls."""
        return {
            "response": {
                "status": self.status,
                "body": self.response.body if self.response is not None else self.reason,
            },
            "request": {"body": self.request.body},
        }


class MissingAccessTokenError(AuthenticationError):
    """Raised when an OAuth2 connection has no access token."""


__all__: list[str] = ["HttpError", "MissingAccessTokenError"]
