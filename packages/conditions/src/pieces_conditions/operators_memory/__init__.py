"""
In-memory operator implementations.

Usage::

    from pieces_conditions.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(FilterOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .null import IsNotNullOperator, IsNullOperator
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import ILikeOperator, LikeOperator, NotILikeOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with every :class:`FilterOperator` registered.

    Returns a fresh instance on each call so tests and callers can
    register extra strategies without affecting each other.
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Comparison
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        GreaterEqualOperator(),
        LessThanOperator(),
        LessEqualOperator(),
        # Pattern
        LikeOperator(),
        ILikeOperator(),
        NotILikeOperator(),
        # Null
        IsNullOperator(),
        IsNotNullOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
