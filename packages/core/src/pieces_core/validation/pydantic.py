"""Pydantic bridge — turn pydantic errors into a :class:`ValidationResult`."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

M = TypeVar("M", bound=BaseModel)


def errors_from_pydantic(
    exc: PydanticValidationError, prefix: str | None = None
) -> dict[str, list[str]]:
    """Flatten ``exc.errors()`` into ``{"loc.path": [messages]}``."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ())]
        if prefix:
            parts.insert(0, prefix)
        loc = ".".join(parts) or "__root__"
        msg = error.get("msg", "validation error")
        errors.setdefault(loc, []).append(msg)
    return errors


def validate_model(
    model_cls: type[M], data: dict[str, Any]
) -> tuple[M | None, ValidationResult]:
    """Validate *data* through *model_cls*.

    Returns the model instance (``None`` on failure) and the result.
    """
    try:
        return model_cls.model_validate(data), ValidationResult.success()
    except PydanticValidationError as exc:
        return None, ValidationResult.failure(errors_from_pydantic(exc))
