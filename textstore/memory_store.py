from __future__ import annotations

import logging
import threading
from typing import Mapping

from .errors import TextNotFoundError
from .interfaces import TextStore
from .patterns import has_wildcards, match_names

logger = logging.getLogger(__name__)


class InMemoryTextStore(TextStore):
    """
    Keeps texts in a process-local dict keyed by arbitrary strings.

    Each instance owns its own mapping and lock; nothing outlives the
    instance.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._texts: dict[str, str] = dict(initial or {})

    def __len__(self) -> int:
        with self._lock:
            return len(self._texts)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._texts

    def write_text(self, identifier: str, content: str) -> None:
        with self._lock:
            self._texts[identifier] = content
        logger.debug("TEXT WRITE (memory): %s (%d chars)", identifier, len(content))

    def read_text(self, identifier: str) -> str:
        with self._lock:
            content = self._texts.get(identifier)
        if content is None:
            raise TextNotFoundError(identifier)
        return content

    def list_names(self, pattern: str) -> list[str]:
        with self._lock:
            if not has_wildcards(pattern):
                return [pattern] if pattern in self._texts else []
            names = list(self._texts)
        return match_names(names, pattern)
