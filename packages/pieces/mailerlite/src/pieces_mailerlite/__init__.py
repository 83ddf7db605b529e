"""pieces-mailerlite — MailerLite subscriber webhooks."""

from __future__ import annotations

from .auth import mailerlite_auth
from .client import MailerLiteClient
from .config import DEFAULT_BASE_URL, MailerLiteConfig
from .piece import build_piece, mailerlite
from .triggers import TRIGGER_DEFINITIONS, build_triggers, register_trigger

__all__ = [
    "DEFAULT_BASE_URL",
    "MailerLiteClient",
    "MailerLiteConfig",
    "TRIGGER_DEFINITIONS",
    "build_piece",
    "build_triggers",
    "mailerlite",
    "mailerlite_auth",
    "register_trigger",
]
