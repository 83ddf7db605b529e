"""Tests for RecordSchema / FieldRule."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pieces_conditions import FieldKind, FieldRule, RecordSchema, ValueRejected


def test_resolve_by_name_and_alias(schema) -> None:
    assert schema.resolve("created_at") is schema.resolve("createdAt")
    assert schema.resolve("nope") is None
    assert schema.resolve(12) is None
    assert "lastIp" in schema


def test_field_names_are_canonical(schema) -> None:
    assert schema.field_names == ["id", "name", "created_at", "platform", "last_ip"]


def test_duplicate_names_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        RecordSchema(
            name="t",
            fields=[
                FieldRule("id", FieldKind.NUMBER),
                FieldRule("a", FieldKind.STRING, aliases=("id",)),
            ],
        )


def test_missing_id_field_rejected() -> None:
    with pytest.raises(ValueError, match="Id field"):
        RecordSchema(name="t", fields=[FieldRule("a", FieldKind.STRING)])


def test_enum_requires_choices() -> None:
    with pytest.raises(ValueError):
        FieldRule("platform", FieldKind.ENUM)


def test_coerce_date_and_enum() -> None:
    assert FieldRule("d", FieldKind.DATE).coerce("2024-05-01T10:00:00") == datetime(
        2024, 5, 1, 10, 0, tzinfo=timezone.utc
    )
    rule = FieldRule("p", FieldKind.ENUM, choices=("ios", "android"))
    assert rule.coerce("ios") == "ios"
    with pytest.raises(ValueRejected):
        rule.coerce("IOS")


def test_coerce_date_only_value_is_utc_midnight() -> None:
    coerced = FieldRule("d", FieldKind.DATE).coerce("2024-01-01")
    assert coerced == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert coerced.utcoffset() == timedelta(0)


def test_coerce_offset_value_is_normalised_to_utc() -> None:
    coerced = FieldRule("d", FieldKind.DATE).coerce("2024-01-01T02:00:00+02:00")
    assert coerced == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert coerced.tzinfo is timezone.utc
