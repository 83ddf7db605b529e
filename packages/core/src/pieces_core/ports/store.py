"""IStore - Protocol for the host's per-flow key/value store."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IStore(Protocol):
    """
    Key/value storage the host hands to triggers and actions.

    Triggers use it to remember what ``on_enable`` created so that
    ``on_disable`` can undo it.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve a value by key. Returns None if missing."""
        ...

    async def put(self, key: str, value: Any) -> Any:
        """Store *value* under *key* and return it."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a value by key. Missing keys are ignored."""
        ...
