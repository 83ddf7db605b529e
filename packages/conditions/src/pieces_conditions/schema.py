"""
Static field schema — which fields a record exposes to filtering and
what a condition value must look like for each of them.

The table is declared by hand next to the record it describes rather
than reflected from ORM column metadata::

    USERS = RecordSchema(
        name="saints_users",
        fields=[
            FieldRule("id", FieldKind.NUMBER),
            FieldRule("platform", FieldKind.ENUM, choices=("ios", "android")),
            FieldRule("created_at", FieldKind.DATE, aliases=("createdAt",)),
        ],
    )
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from functools import cached_property
from typing import Any, Literal

from pydantic import StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    ENUM = "enum"


class ValueRejected(ValueError):
    """Raised by :meth:`FieldRule.coerce` with a human readable reason."""


@dataclass(frozen=True)
class FieldRule:
    """Type rule for one filterable field.

    ``aliases`` lets callers use the camelCase attribute name
    (``deviceId``) as well as the column name (``device_id``).
    """

    name: str
    kind: FieldKind
    choices: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind == FieldKind.ENUM and not self.choices:
            raise ValueError(f"Enum field {self.name!r} needs at least one choice")

    @cached_property
    def _adapter(self) -> TypeAdapter[Any]:
        if self.kind == FieldKind.STRING:
            return TypeAdapter(StrictStr)
        if self.kind == FieldKind.NUMBER:
            return TypeAdapter(int | float)
        if self.kind == FieldKind.DATE:
            return TypeAdapter(datetime)
        return TypeAdapter(Literal[self.choices])  # type: ignore[valid-type]

    def coerce(self, value: Any) -> Any:
        """Return *value* converted to the field's type.

        Raises:
            ValueRejected: If the value does not fit the field.
        """
        if value is None:
            raise ValueRejected("a value is required for this operator")
        if self.kind == FieldKind.NUMBER and isinstance(value, bool):
            raise ValueRejected("expected a number")
        try:
            coerced = self._adapter.validate_python(value)
        except PydanticValidationError as exc:
            errors = exc.errors()
            reason = errors[0]["msg"] if errors else "invalid value"
            raise ValueRejected(reason) from exc
        if self.kind == FieldKind.DATE:
            return _as_utc(coerced)
        return coerced


@dataclass(frozen=True)
class RecordSchema:
    """The set of filterable fields of one record type."""

    name: str
    fields: Iterable[FieldRule]
    id_field: str = "id"
    _by_name: dict[str, FieldRule] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rules = tuple(self.fields)
        by_name: dict[str, FieldRule] = {}
        for rule in rules:
            for key in (rule.name, *rule.aliases):
                if key in by_name:
                    raise ValueError(f"Duplicate field name {key!r} on {self.name!r}")
                by_name[key] = rule
        if self.id_field not in by_name:
            raise ValueError(f"Id field {self.id_field!r} is not declared on {self.name!r}")
        object.__setattr__(self, "fields", rules)
        object.__setattr__(self, "_by_name", by_name)

    @property
    def field_names(self) -> list[str]:
        return [rule.name for rule in self.fields]  # type: ignore[union-attr]

    def resolve(self, name: Any) -> FieldRule | None:
        if not isinstance(name, str):
            return None
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return self.resolve(name) is not None


def _as_utc(value: datetime) -> datetime:
    # Date-only and offset-less inputs are instants in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
