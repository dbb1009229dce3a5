from __future__ import annotations

import logging

from .disk_store import PersistentTextStore
from .interfaces import TextStore
from .memory_store import InMemoryTextStore
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_text_store(settings: Settings | None = None) -> TextStore:
    """Build the store selected by `settings` (read from the environment when omitted)."""
    settings = settings or get_settings()

    if settings.persist_to_disk:
        logger.debug(
            "TEXT STORE: persistent (encoding=%s create_parents=%s)", settings.encoding, settings.create_parents
        )
        return PersistentTextStore(encoding=settings.encoding, create_parents=settings.create_parents)

    logger.debug("TEXT STORE: in-memory")
    return InMemoryTextStore()
