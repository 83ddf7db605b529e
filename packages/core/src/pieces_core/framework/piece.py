"""Piece — a bundle of actions and triggers the host registers together."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from ..primitives.exceptions import (
    ActionNotFoundError,
    PieceRegistrationError,
    TriggerNotFoundError,
)
from .action import Action
from .auth import AuthValidation, PieceAuth
from .context import ActionContext, TriggerContext
from .trigger import Trigger

logger = logging.getLogger(__name__)

_Named = TypeVar("_Named", Action, Trigger)


def _index(kind: str, piece: str, items: Sequence[_Named]) -> dict[str, _Named]:
    indexed: dict[str, _Named] = {}
    for item in items:
        if item.name in indexed:
            raise PieceRegistrationError(
                f"Duplicate {kind} {item.name!r} in piece {piece!r}"
            )
        indexed[item.name] = item
        logger.debug("Registered %s %s on piece %s", kind, item.name, piece)
    return indexed


@dataclass
class Piece:
    """
    **Conflict detection:** two actions (or two triggers) with the same
    name raise :class:`PieceRegistrationError` at construction.
    """

    display_name: str
    auth: PieceAuth | None = None
    actions: Sequence[Action] = ()
    triggers: Sequence[Trigger] = ()
    minimum_supported_release: str | None = None
    logo_url: str | None = None
    authors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._actions = _index("action", self.display_name, self.actions)
        self._triggers = _index("trigger", self.display_name, self.triggers)

    @property
    def action_names(self) -> list[str]:
        return list(self._actions)

    @property
    def trigger_names(self) -> list[str]:
        return list(self._triggers)

    def get_action(self, name: str) -> Action:
        action = self._actions.get(name)
        if action is None:
            raise ActionNotFoundError(self.display_name, name)
        return action

    def get_trigger(self, name: str) -> Trigger:
        trigger = self._triggers.get(name)
        if trigger is None:
            raise TriggerNotFoundError(self.display_name, name)
        return trigger

    async def run_action(self, name: str, context: ActionContext) -> Any:
        return await self.get_action(name).execute(context)

    async def handle_trigger(self, name: str, context: TriggerContext) -> list[Any]:
        return await self.get_trigger(name).handle(context)

    async def validate_auth(self, value: Any) -> AuthValidation:
        if self.auth is None:
            return AuthValidation(valid=True)
        return await self.auth.check(value)


def create_piece(
    *,
    display_name: str,
    auth: PieceAuth | None = None,
    actions: Sequence[Action] = (),
    triggers: Sequence[Trigger] = (),
    minimum_supported_release: str | None = None,
    logo_url: str | None = None,
    authors: list[str] | None = None,
) -> Piece:
    return Piece(
        display_name=display_name,
        auth=auth,
        actions=list(actions),
        triggers=list(triggers),
        minimum_supported_release=minimum_supported_release,
        logo_url=logo_url,
        authors=authors or [],
    )
