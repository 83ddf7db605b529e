"""Null check operators: isNull, isNotNull. The condition value is ignored."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


class IsNullOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return field_value is None


class IsNotNullOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IS_NOT_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return field_value is not None
