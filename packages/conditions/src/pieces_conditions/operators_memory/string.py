"""Substring pattern operators: like, ilike, notIlike.

The condition value is wrapped as ``%value%``; ``%`` and ``_`` inside
the value keep their SQL wildcard meaning.
"""

from __future__ import annotations

import re
from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


def substring_pattern(value: Any) -> str:
    return f"%{value}%"


def _sql_pattern_to_regex(pattern: str) -> str:
    """Convert SQL LIKE pattern (``%``, ``_``) to an anchored Python regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


def _matches(field_value: Any, condition_value: Any, flags: int = 0) -> bool:
    regex = _sql_pattern_to_regex(substring_pattern(condition_value))
    return re.match(regex, str(field_value), flags | re.DOTALL) is not None


class LikeOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return _matches(field_value, condition_value)


class ILikeOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ILIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return _matches(field_value, condition_value, re.IGNORECASE)


class NotILikeOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_ILIKE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return not _matches(field_value, condition_value, re.IGNORECASE)
