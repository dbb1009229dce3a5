from __future__ import annotations

import asyncio
from typing import Protocol

from .interfaces import TextStore


class AsyncTextStore(Protocol):
    async def write_text(self, identifier: str, content: str) -> None: ...
    async def read_text(self, identifier: str) -> str: ...
    async def list_names(self, pattern: str) -> list[str]: ...


class AsyncTextStoreAdapter(AsyncTextStore):
    """
    Async wrapper around any sync TextStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: TextStore) -> None:
        self._store = store

    @property
    def store(self) -> TextStore:
        return self._store

    async def write_text(self, identifier: str, content: str) -> None:
        await asyncio.to_thread(self._store.write_text, identifier, content)

    async def read_text(self, identifier: str) -> str:
        return await asyncio.to_thread(self._store.read_text, identifier)

    async def list_names(self, pattern: str) -> list[str]:
        return await asyncio.to_thread(self._store.list_names, pattern)
