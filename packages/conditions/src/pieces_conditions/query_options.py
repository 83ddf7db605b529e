"""
Query options for ordering and pagination.

``QueryOptions`` wraps a validated condition list with result-shaping
parameters. The conditions define *what* to match; the options define
*how* results come back. Both the in-memory evaluator and the SQLAlchemy
compiler consume the same object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .condition import FilterCondition
from .pagination import PageWindow


@dataclass(frozen=True)
class QueryOptions:
    """
    Immutable container for result-shaping parameters.

    Attributes:
        conditions: Conjoined filter conditions (empty = match everything).
        order_by: Field names; prefix with ``-`` for descending.
        limit: Maximum number of results.
        offset: Number of results to skip.
    """

    conditions: tuple[FilterCondition, ...] = ()
    order_by: tuple[str, ...] = ("id",)
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def for_page(
        cls,
        conditions: list[FilterCondition] | tuple[FilterCondition, ...],
        window: PageWindow,
        *,
        order_by: str = "id",
    ) -> QueryOptions:
        return cls(
            conditions=tuple(conditions),
            order_by=(order_by,),
            limit=window.limit,
            offset=window.offset,
        )

    @property
    def next_page(self) -> int:
        """1-based page number following the window described by limit/offset."""
        if not self.limit:
            return 2
        return (self.offset or 0) // self.limit + 2


@dataclass(frozen=True)
class FilterPage:
    """One page of filtered records plus the cursor for the next one."""

    records: list[Any] = field(default_factory=list)
    next_page: int = 2

    @property
    def count(self) -> int:
        return len(self.records)
