"""Comparison operators: eq, ne, gt, gte, lt, lte."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value == condition_value)


class NotEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value != condition_value)


class GreaterThanOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GT

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value > condition_value)


class GreaterEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GTE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value >= condition_value)


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LT

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value < condition_value)


class LessEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LTE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return bool(field_value <= condition_value)
