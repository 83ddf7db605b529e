"""ValidationResult — structured, ordered validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..primitives.exceptions import ValidationError


def default_errors_factory() -> dict[str, list[str]]:
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    Keys keep insertion order, so the first key is always the first
    violation that was recorded.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"filters[0].field": ["unknown field"]})
        result.raise_if_invalid()
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def first_error(self) -> tuple[str, str] | None:
        """Return ``(location, message)`` of the first recorded violation."""
        for location, messages in self.errors.items():
            if messages:
                return location, messages[0]
        return None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one, combining all errors."""
        merged = dict(self.errors)
        for field_name, messages in other.errors.items():
            existing = merged.get(field_name, [])
            merged[field_name] = existing + messages
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise ValidationError(self.errors)

    def __bool__(self) -> bool:
        return self.is_valid
