from __future__ import annotations

from .async_store import AsyncTextStore, AsyncTextStoreAdapter
from .disk_store import PersistentTextStore
from .errors import (
    NonexistentParentError,
    PathPatternError,
    TextIOError,
    TextNotFoundError,
    TextStoreError,
    WildcardInParentError,
)
from .factory import create_text_store
from .interfaces import TextStore
from .memory_store import InMemoryTextStore
from .settings import Settings, get_settings

__all__ = [
    "TextStore",
    "PersistentTextStore",
    "InMemoryTextStore",
    "AsyncTextStore",
    "AsyncTextStoreAdapter",
    "TextStoreError",
    "TextNotFoundError",
    "TextIOError",
    "PathPatternError",
    "WildcardInParentError",
    "NonexistentParentError",
    "Settings",
    "get_settings",
    "create_text_store",
]
