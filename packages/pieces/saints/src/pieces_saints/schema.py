"""Filterable fields of ``saints_users`` and their value types."""

from __future__ import annotations

from pieces_conditions import ConditionTranslator, FieldKind, FieldRule, RecordSchema

PLATFORMS = ("ios", "android")

USER_FIELDS: tuple[FieldRule, ...] = (
    FieldRule("id", FieldKind.NUMBER),
    FieldRule("device_id", FieldKind.STRING, aliases=("deviceId",)),
    FieldRule("track_accepted_date", FieldKind.DATE, aliases=("trackAcceptedDate",)),
    FieldRule(
        "notifications_accepted_date",
        FieldKind.DATE,
        aliases=("notificationsAcceptedDate",),
    ),
    FieldRule("created_at", FieldKind.DATE, aliases=("createdAt",)),
    FieldRule("platform", FieldKind.ENUM, choices=PLATFORMS),
    FieldRule("last_ip", FieldKind.STRING, aliases=("lastIp",)),
    FieldRule("last_location", FieldKind.STRING, aliases=("lastLocation",)),
)

USER_SCHEMA = RecordSchema(name="saints_users", fields=USER_FIELDS)

user_translator = ConditionTranslator(USER_SCHEMA)
