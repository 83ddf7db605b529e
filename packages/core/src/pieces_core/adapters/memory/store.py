"""InMemoryStore — dict-backed fake of the host store for unit tests."""

from __future__ import annotations

import copy
from typing import Any

from ...ports.store import IStore


class InMemoryStore(IStore):
    """In-memory implementation of :class:`IStore`.

    Values are deep-copied on the way in and out so callers cannot
    mutate stored state by accident, like a serialising host store.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    async def put(self, key: str, value: Any) -> Any:
        self._data[key] = copy.deepcopy(value)
        return value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
