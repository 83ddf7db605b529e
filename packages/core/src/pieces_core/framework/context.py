"""Execution contexts handed to action runs and trigger hooks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from ..adapters.memory.store import InMemoryStore
from ..correlation import generate_correlation_id
from ..ports.store import IStore


def _new_run() -> RunInfo:
    return RunInfo(id=generate_correlation_id())


@dataclass(frozen=True)
class RunInfo:
    """Identifies the flow run an action executes in."""

    id: str


@dataclass(frozen=True)
class WebhookPayload:
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ActionContext:
    auth: Any = None
    props_value: dict[str, Any] = field(default_factory=dict)
    store: IStore = field(default_factory=InMemoryStore)
    run: RunInfo = field(default_factory=_new_run)

    def replace(self, **changes: Any) -> ActionContext:
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class TriggerContext:
    auth: Any = None
    props_value: dict[str, Any] = field(default_factory=dict)
    store: IStore = field(default_factory=InMemoryStore)
    webhook_url: str = ""
    payload: WebhookPayload = field(default_factory=WebhookPayload)

    def replace(self, **changes: Any) -> TriggerContext:
        return dataclasses.replace(self, **changes)
