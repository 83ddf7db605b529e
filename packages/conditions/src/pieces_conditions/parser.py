"""ConditionParser — raw ``{field, operator, value}`` entries -> FilterCondition list."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from pieces_core.validation.result import ValidationResult

from .condition import FilterCondition
from .exceptions import (
    ConditionError,
    FieldNotFoundError,
    MalformedConditionError,
    OperatorNotFoundError,
    ValueTypeError,
)
from .operators import FilterOperator
from .schema import RecordSchema, ValueRejected

logger = logging.getLogger(__name__)

_VALID_OPERATORS: list[str] = [op.value for op in FilterOperator]


class _Entry(NamedTuple):
    index: int
    field: Any
    operator: Any
    value: Any


class ParseOutcome(NamedTuple):
    conditions: list[FilterCondition]
    errors: list[ConditionError]


class ConditionParser:
    """
    Validate and normalise a batch of filter conditions against a schema.

    Checks run in a fixed order so the reported error is deterministic:

    1. every entry is a mapping with a field (``field`` or ``column`` key);
    2. every field exists in the schema, across the whole batch;
    3. per entry, in input order: the operator is known, then the value
       fits the field's type (skipped for ``isNull`` / ``isNotNull``).

    :meth:`parse` raises the first violation; :meth:`validate` reports
    all of them.
    """

    def __init__(self, schema: RecordSchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    def parse(self, raw: Sequence[Any] | None) -> list[FilterCondition]:
        """Return normalised conditions or raise the first ``ConditionError``."""
        outcome = self._inspect(raw, collect=False)
        if outcome.errors:
            first = outcome.errors[0]
            logger.info("Rejected filter batch: %s", first.message)
            raise first
        return outcome.conditions

    def validate(self, raw: Sequence[Any] | None) -> ValidationResult:
        """Collect every violation in the batch without raising."""
        result = ValidationResult.success()
        for error in self._inspect(raw, collect=True).errors:
            result = result.merge(ValidationResult.failure(error.errors))
        return result

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #

    def _inspect(self, raw: Sequence[Any] | None, *, collect: bool) -> ParseOutcome:
        errors: list[ConditionError] = []
        entries: list[_Entry] = []
        for index, item in enumerate(raw or []):
            entry = _to_entry(index, item)
            if entry is None:
                errors.append(MalformedConditionError(item, index=index))
            else:
                entries.append(entry)

        for entry in entries:
            if entry.field not in self._schema:
                errors.append(
                    FieldNotFoundError(
                        entry.field,
                        self._schema.name,
                        self._schema.field_names,
                        index=entry.index,
                    )
                )
        if errors and not collect:
            return ParseOutcome([], errors)

        conditions: list[FilterCondition] = []
        for entry in entries:
            rule = self._schema.resolve(entry.field)
            if rule is None:
                continue
            operator = _to_operator(entry.operator)
            if operator is None:
                errors.append(
                    OperatorNotFoundError(
                        entry.operator, _VALID_OPERATORS, index=entry.index
                    )
                )
                if not collect:
                    break
                continue
            if operator.checks_null:
                conditions.append(FilterCondition(rule.name, operator))
                continue
            try:
                value = rule.coerce(entry.value)
            except ValueRejected as exc:
                errors.append(
                    ValueTypeError(rule.name, entry.value, str(exc), index=entry.index)
                )
                if not collect:
                    break
                continue
            conditions.append(FilterCondition(rule.name, operator, value))

        if errors:
            return ParseOutcome([], errors)
        return ParseOutcome(conditions, [])


def _to_entry(index: int, item: Any) -> _Entry | None:
    if isinstance(item, FilterCondition):
        return _Entry(index, item.field, item.operator, item.value)
    if not isinstance(item, Mapping):
        return None
    field = item.get("field", item.get("column"))
    if field is None:
        return None
    return _Entry(index, field, item.get("operator"), item.get("value"))


def _to_operator(value: Any) -> FilterOperator | None:
    if isinstance(value, FilterOperator):
        return value
    if not isinstance(value, str):
        return None
    try:
        return FilterOperator(value)
    except ValueError:
        return None
