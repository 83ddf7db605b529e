"""Piece authentication declarations."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..primitives.exceptions import AuthenticationError, ValidationError
from .property import PropertyDefinition, check_props, validate_props

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthValidation:
    """Outcome of an auth ``validate`` hook."""

    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}


AuthValidator = Callable[[Any], Awaitable[AuthValidation]]


@dataclass(frozen=True)
class SecretTextAuth:
    """A single secret string such as an API key."""

    display_name: str
    description: str | None = None
    required: bool = True
    validate: AuthValidator | None = None

    def resolve(self, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise AuthenticationError(f"{self.display_name} is required")
        return value

    async def check(self, value: Any) -> AuthValidation:
        try:
            resolved = self.resolve(value)
        except AuthenticationError as exc:
            return AuthValidation(valid=False, error=str(exc))
        if self.validate is None:
            return AuthValidation(valid=True)
        return await self.validate(resolved)


@dataclass(frozen=True)
class CustomAuth:
    """A connection made of several declared properties (host, port, ...)."""

    props: Mapping[str, PropertyDefinition] = field(default_factory=dict)
    description: str | None = None
    required: bool = True
    validate: AuthValidator | None = None

    def resolve(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise AuthenticationError("Connection is required")
        return validate_props(self.props, value)

    async def check(self, value: Any) -> AuthValidation:
        """Validate the declared props first, then the ``validate`` hook."""
        if not isinstance(value, Mapping):
            return AuthValidation(valid=False, error="Connection is required")
        resolved, result = check_props(self.props, value)
        if not result.is_valid:
            return AuthValidation(valid=False, error=str(ValidationError(result.errors)))
        if self.validate is None:
            return AuthValidation(valid=True)
        outcome = await self.validate(resolved)
        if not outcome.valid:
            logger.warning("Connection validation failed: %s", outcome.error)
        return outcome


PieceAuth = SecretTextAuth | CustomAuth
