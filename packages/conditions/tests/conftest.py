"""Shared fixtures for condition tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pieces_conditions import ConditionTranslator, FieldKind, FieldRule, RecordSchema


@pytest.fixture
def schema() -> RecordSchema:
    return RecordSchema(
        name="users",
        fields=[
            FieldRule("id", FieldKind.NUMBER),
            FieldRule("name", FieldKind.STRING),
            FieldRule("created_at", FieldKind.DATE, aliases=("createdAt",)),
            FieldRule("platform", FieldKind.ENUM, choices=("ios", "android")),
            FieldRule("last_ip", FieldKind.STRING, aliases=("lastIp",)),
        ],
    )


@pytest.fixture
def translator(schema: RecordSchema) -> ConditionTranslator:
    return ConditionTranslator(schema)


@pytest.fixture
def records() -> list[dict]:
    return [
        {
            "id": 3,
            "name": "John Smith",
            "created_at": datetime(2024, 3, 1, tzinfo=timezone.utc),
            "platform": "ios",
            "last_ip": None,
        },
        {
            "id": 1,
            "name": "Ada Lovelace",
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "platform": "android",
            "last_ip": "10.0.0.1",
        },
        {
            "id": 2,
            "name": "Grace Hopper",
            "created_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
            "platform": "ios",
            "last_ip": "10.0.0.2",
        },
    ]
