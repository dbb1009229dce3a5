from __future__ import annotations

import asyncio

import pytest

from textstore import AsyncTextStoreAdapter, InMemoryTextStore, TextNotFoundError


def test_async_adapter_roundtrip(store_and_ident):
    store, ident = store_and_ident

    async def _run():
        repo = AsyncTextStoreAdapter(store)
        assert repo.store is store

        await repo.write_text(ident("greeting"), "hello world")
        assert await repo.read_text(ident("greeting")) == "hello world"

        await repo.write_text(ident("greeting"), "bye")
        assert await repo.read_text(ident("greeting")) == "bye"

        with pytest.raises(TextNotFoundError):
            await repo.read_text(ident("missing"))

        assert await repo.list_names(ident("greeting")) == [ident("greeting")]

    asyncio.run(_run())


def test_async_adapter_concurrent_writes():
    store = InMemoryTextStore()

    async def _run():
        repo = AsyncTextStoreAdapter(store)
        await asyncio.gather(*(repo.write_text(f"k{i}", str(i)) for i in range(50)))
        values = await asyncio.gather(*(repo.read_text(f"k{i}") for i in range(50)))
        assert values == [str(i) for i in range(50)]

    asyncio.run(_run())
    assert len(store) == 50
