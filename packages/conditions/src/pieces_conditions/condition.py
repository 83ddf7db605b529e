from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .operators import FilterOperator


@dataclass(frozen=True)
class FilterCondition:
    """One ``field operator value`` test.

    Instances produced by :class:`~pieces_conditions.parser.ConditionParser`
    carry the canonical field name and an already-coerced value.
    """

    field: str
    operator: FilterOperator
    value: Any = None

    @property
    def uses_value(self) -> bool:
        return not self.operator.checks_null

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form (dates become ISO-8601 strings)."""
        value = self.value
        if isinstance(value, datetime | date):
            value = value.isoformat()
        result: dict[str, Any] = {"field": self.field, "operator": self.operator.value}
        if self.uses_value:
            result["value"] = value
        return result
