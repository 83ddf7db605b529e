"""
Compile validated filter conditions into a SQLAlchemy filter expression.

Uses the strategy pattern: each operator is an isolated class in
``operators/``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_sqla_filter`` resolves each condition's column and conjoins
the per-condition clauses with ``AND``.

Query Options
-------------
``apply_query_options`` takes a ``Select`` statement and a
``QueryOptions`` instance and applies ordering and limit/offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, asc, desc, true

from .exceptions import MappingError
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pieces_conditions.condition import FilterCondition
    from pieces_conditions.query_options import QueryOptions

    from .strategy import SQLAlchemyOperatorRegistry


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    model: type[Any],
    conditions: Sequence[FilterCondition],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from validated conditions.

    Args:
        model: The SQLAlchemy model class.
        conditions: Conditions produced by ``ConditionParser``.
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        SQLAlchemy Boolean expression; ``true()`` for an empty list.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    clauses = [
        reg.apply(c.operator, _resolve_column(model, c.field), c.value)
        for c in conditions
    ]
    if not clauses:
        return true()
    if len(clauses) == 1:
        return clauses[0]
    return and_(*clauses)


def apply_query_options(
    stmt: Select[Any],
    model: type[Any],
    options: QueryOptions | None,
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> Select[Any]:
    """
    Apply a ``QueryOptions`` instance to a SQLAlchemy ``Select`` statement.

    Handles: ``conditions`` (``WHERE``), ``order_by``, ``limit`` and
    ``offset``.
    """
    if options is None:
        return stmt

    if options.conditions:
        stmt = stmt.where(build_sqla_filter(model, options.conditions, registry=registry))
    stmt = _apply_order_by(stmt, model, options)
    return _apply_limit_offset(stmt, options)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _resolve_column(model: type[Any], field: str) -> Any:
    column = getattr(model, field, None)
    if column is None:
        raise MappingError(f"Model {model.__name__} has no column for field {field!r}")
    return column


def _apply_order_by(
    stmt: Select[Any], model: type[Any], options: QueryOptions
) -> Select[Any]:
    if not options.order_by:
        return stmt

    order_clauses: list[Any] = []
    for field_expr in options.order_by:
        if field_expr.startswith("-"):
            order_clauses.append(desc(_resolve_column(model, field_expr[1:])))
        else:
            order_clauses.append(asc(_resolve_column(model, field_expr)))
    return stmt.order_by(*order_clauses)


def _apply_limit_offset(stmt: Select[Any], options: QueryOptions) -> Select[Any]:
    if options.limit is not None:
        stmt = stmt.limit(options.limit)
    if options.offset is not None:
        stmt = stmt.offset(options.offset)
    return stmt
