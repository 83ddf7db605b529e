"""Triggers — start a flow from an external event."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..primitives.exceptions import AuthenticationError
from .auth import PieceAuth
from .context import TriggerContext
from .property import PropertyDefinition, validate_props

logger = logging.getLogger(__name__)

TriggerHook = Callable[[TriggerContext], Awaitable[Any]]


class TriggerStrategy(str, Enum):
    WEBHOOK = "WEBHOOK"
    POLLING = "POLLING"


async def _noop(_context: TriggerContext) -> None:
    return None


@dataclass(frozen=True)
class Trigger:
    """
    Lifecycle: ``enable`` once when the flow is published, ``handle`` for
    every delivered event, ``disable`` when the flow is turned off.
    """

    name: str
    display_name: str
    description: str
    type: TriggerStrategy
    run: TriggerHook
    on_enable: TriggerHook = _noop
    on_disable: TriggerHook = _noop
    props: Mapping[str, PropertyDefinition] = field(default_factory=dict)
    sample_data: Any = None
    auth: PieceAuth | None = None

    def _prepare(self, context: TriggerContext) -> TriggerContext:
        props_value = validate_props(self.props, context.props_value)
        auth_value = context.auth
        if self.auth is not None:
            if auth_value is None:
                raise AuthenticationError(f"Trigger {self.name!r} requires a connection")
            auth_value = self.auth.resolve(auth_value)
        return context.replace(props_value=props_value, auth=auth_value)

    async def enable(self, context: TriggerContext) -> None:
        logger.info("Enabling trigger %s", self.name)
        await self.on_enable(self._prepare(context))

    async def disable(self, context: TriggerContext) -> None:
        logger.info("Disabling trigger %s", self.name)
        await self.on_disable(self._prepare(context))

    async def handle(self, context: TriggerContext) -> list[Any]:
        """Turn one delivered payload into the list of flow inputs."""
        items = await self.run(self._prepare(context))
        logger.debug("Trigger %s produced %d item(s)", self.name, len(items))
        return list(items)


def create_trigger(
    *,
    name: str,
    display_name: str,
    description: str,
    type: TriggerStrategy,
    run: TriggerHook,
    on_enable: TriggerHook | None = None,
    on_disable: TriggerHook | None = None,
    props: Mapping[str, PropertyDefinition] | None = None,
    sample_data: Any = None,
    auth: PieceAuth | None = None,
) -> Trigger:
    return Trigger(
        name=name,
        display_name=display_name,
        description=description,
        type=type,
        run=run,
        on_enable=on_enable or _noop,
        on_disable=on_disable or _noop,
        props=dict(props or {}),
        sample_data=sample_data,
        auth=auth,
    )
