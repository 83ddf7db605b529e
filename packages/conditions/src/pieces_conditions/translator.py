"""
ConditionTranslator — validated conditions -> conjoined record predicate.

Translation is pure: nothing here performs I/O. The SQLAlchemy compiler
in ``pieces_sqlalchemy`` consumes the same ``FilterCondition`` objects
to build a ``WHERE`` clause; this module evaluates them in memory.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .condition import FilterCondition
from .evaluator import MemoryOperatorRegistry
from .operators_memory import build_default_registry
from .pagination import PageWindow
from .parser import ConditionParser
from .query_options import FilterPage, QueryOptions
from .schema import RecordSchema


def resolve_field(record: Any, name: str) -> Any:
    """Read *name* from a mapping or an attribute object."""
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


class ConditionPredicate:
    """Logical AND of every condition; an empty list matches everything."""

    def __init__(
        self,
        conditions: Sequence[FilterCondition],
        registry: MemoryOperatorRegistry,
    ) -> None:
        self.conditions = tuple(conditions)
        self._registry = registry

    def __call__(self, record: Any) -> bool:
        return all(
            self._registry.evaluate(
                c.operator, resolve_field(record, c.field), c.value
            )
            for c in self.conditions
        )

    def filter(self, records: Iterable[Any]) -> list[Any]:
        return [r for r in records if self(r)]


class ConditionTranslator:
    """
    Parse, translate and page through records for one record schema.

    Usage::

        translator = ConditionTranslator(USERS)
        options = translator.query(
            [{"field": "platform", "operator": "eq", "value": "ios"}],
            page=1,
            page_size=100,
        )
        page = translator.select(records, options)
    """

    def __init__(
        self,
        schema: RecordSchema,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self.schema = schema
        self.parser = ConditionParser(schema)
        self._registry = registry or build_default_registry()

    def parse(self, raw: Sequence[Any] | None) -> list[FilterCondition]:
        return self.parser.parse(raw)

    def predicate(self, conditions: Sequence[FilterCondition]) -> ConditionPredicate:
        return ConditionPredicate(conditions, self._registry)

    def translate(self, raw: Sequence[Any] | None) -> ConditionPredicate:
        return self.predicate(self.parse(raw))

    def query(
        self,
        raw: Sequence[Any] | None,
        *,
        page: Any = 1,
        page_size: Any = 100,
    ) -> QueryOptions:
        """Validate *raw* and attach id ordering plus the page window."""
        conditions = self.parse(raw)
        window = PageWindow.parse(page, page_size)
        return QueryOptions.for_page(conditions, window, order_by=self.schema.id_field)

    def select(self, records: Iterable[Any], options: QueryOptions) -> FilterPage:
        """Apply *options* to an in-memory record set."""
        matched = self.predicate(options.conditions).filter(records)
        for key in reversed(options.order_by):
            descending = key.startswith("-")
            name = key.lstrip("-")
            matched.sort(
                key=lambda r, n=name: _sort_key(resolve_field(r, n)),
                reverse=descending,
            )
        start = options.offset or 0
        stop = None if options.limit is None else start + options.limit
        window = matched[start:stop]
        return FilterPage(records=window, next_page=options.next_page)


def _sort_key(value: Any) -> tuple[bool, Any]:
    # NULLs sort last ascending, like PostgreSQL
    return (value is None, value if value is not None else 0)
