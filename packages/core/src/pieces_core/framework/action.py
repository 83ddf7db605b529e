"""Actions — a named, property-driven unit of work a flow step runs."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..correlation import correlation_scope
from ..primitives.exceptions import AuthenticationError
from .auth import PieceAuth
from .context import ActionContext
from .property import PropertyDefinition, validate_props

logger = logging.getLogger(__name__)

ActionRunner = Callable[[ActionContext], Awaitable[Any]]


@dataclass(frozen=True)
class Action:
    name: str
    display_name: str
    description: str
    run: ActionRunner
    props: Mapping[str, PropertyDefinition] = field(default_factory=dict)
    auth: PieceAuth | None = None
    require_auth: bool = True

    def prepare(self, context: ActionContext) -> ActionContext:
        """Validate props and auth, returning a context with typed values."""
        props_value = validate_props(self.props, context.props_value)
        auth_value = context.auth
        if self.auth is not None and self.require_auth:
            if auth_value is None:
                raise AuthenticationError(f"Action {self.name!r} requires a connection")
            auth_value = self.auth.resolve(auth_value)
        return context.replace(props_value=props_value, auth=auth_value)

    async def execute(self, context: ActionContext) -> Any:
        """Run the action — logs name, run id and duration."""
        with correlation_scope(context.run.id) as run_id:
            logger.info("Running action %s (run_id=%s)", self.name, run_id)
            start = time.perf_counter()
            try:
                result = await self.run(self.prepare(context))
            except Exception:
                elapsed = (time.perf_counter() - start) * 1000
                logger.exception("Action %s failed after %.2fms", self.name, elapsed)
                raise
            elapsed = (time.perf_counter() - start) * 1000
            logger.info("Action %s completed in %.2fms", self.name, elapsed)
            return result


def create_action(
    *,
    name: str,
    display_name: str,
    description: str,
    run: ActionRunner,
    props: Mapping[str, PropertyDefinition] | None = None,
    auth: PieceAuth | None = None,
    require_auth: bool | None = None,
) -> Action:
    return Action(
        name=name,
        display_name=display_name,
        description=description,
        run=run,
        props=dict(props or {}),
        auth=auth,
        require_auth=auth is not None if require_auth is None else require_auth,
    )
