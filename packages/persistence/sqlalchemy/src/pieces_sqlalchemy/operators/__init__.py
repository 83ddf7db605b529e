"""
SQLAlchemy operator implementations and default registry.

Usage::

    from pieces_sqlalchemy.operators import DEFAULT_SQLA_REGISTRY

    expr = DEFAULT_SQLA_REGISTRY.apply(FilterOperator.EQ, column, value)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
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


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    registry = SQLAlchemyOperatorRegistry()
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


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "build_default_sqla_registry",
    "SQLAlchemyOperatorRegistry",
]
