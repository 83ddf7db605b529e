import pytest

from pieces_core import InMemoryStore, IStore


@pytest.mark.asyncio
async def test_put_get_delete() -> None:
    store = InMemoryStore()

    await store.put("subscriber.created", {"data": {"id": "wh-1"}})
    assert await store.get("subscriber.created") == {"data": {"id": "wh-1"}}

    await store.delete("subscriber.created")
    assert await store.get("subscriber.created") is None


@pytest.mark.asyncio
async def test_values_are_copied() -> None:
    store = InMemoryStore()
    value = {"data": {"id": "wh-1"}}
    await store.put("k", value)

    value["data"]["id"] = "changed"
    fetched = await store.get("k")
    fetched["data"]["id"] = "also changed"

    assert await store.get("k") == {"data": {"id": "wh-1"}}


@pytest.mark.asyncio
async def test_delete_missing_key_is_noop() -> None:
    store = InMemoryStore()
    await store.delete("missing")
    assert store.keys() == []


def test_satisfies_port() -> None:
    assert isinstance(InMemoryStore(), IStore)
