"""
Condition exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``ConditionError`` (a core ``ValidationError``)
and provide ``to_dict()`` for API-friendly error responses. ``index`` is
the position of the offending condition in the submitted batch.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from pieces_core.primitives.exceptions import ValidationError


def condition_location(index: int | None, key: str) -> str:
    if index is None:
        return key
    return f"filters[{index}].{key}"


class ConditionError(ValidationError):
    """Base exception for every rejected filter condition."""

    def __init__(self, message: str, *, index: int | None, key: str) -> None:
        self.message = message
        self.index = index
        super().__init__({condition_location(index, key): [message]})

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONDITION_ERROR",
            "message": self.message,
            "index": self.index,
        }


class MalformedConditionError(ConditionError):
    """A batch entry is not a ``{field, operator, value}`` mapping."""

    def __init__(self, entry: Any, *, index: int | None = None) -> None:
        self.entry = entry
        super().__init__(
            f"Condition must be an object with 'field' and 'operator', got {entry!r}",
            index=index,
            key="__root__",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MALFORMED_CONDITION",
            "message": self.message,
            "index": self.index,
        }


class FieldNotFoundError(ConditionError):
    """
    Unknown field with helpful suggestions.

    Example error message::

        Invalid field 'platfrom' on 'users'.
        Did you mean one of these?
          • platform

        Available fields: created_at, device_id, id, ...
    """

    def __init__(
        self,
        invalid_field: Any,
        record_name: str,
        available_fields: list[str],
        *,
        index: int | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.record_name = record_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            str(invalid_field), available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message(), index=index, key="field")

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.record_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")
        preview = ", ".join(sorted(self.available_fields))
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "record": self.record_name,
            "index": self.index,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class OperatorNotFoundError(ConditionError):
    """
    Unsupported operator.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(
        self, operator: Any, valid_operators: list[str], *, index: int | None = None
    ) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            str(operator), valid_operators, n=3, cutoff=0.6
        )

        message = f"Unsupported operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(valid_operators)}"
        super().__init__(message, index=index, key="operator")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "index": self.index,
            "suggestions": self.suggestions,
            "valid_operators": list(self.valid_operators),
        }


class ValueTypeError(ConditionError):
    """The value does not satisfy the field's type rule."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        *,
        index: int | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid value {value!r} for field '{field}': {reason}",
            index=index,
            key="value",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_VALUE",
            "field": self.field,
            "value": repr(self.value),
            "index": self.index,
            "reason": self.reason,
        }
