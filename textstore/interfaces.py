from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextStore(Protocol):
    """
    Whole-text storage addressed by a string identifier.

    Implementations raise TextNotFoundError when nothing is stored under an
    identifier and TextIOError when the medium itself fails.
    """

    def write_text(self, identifier: str, content: str) -> None:
        """Store `content` under `identifier`, replacing anything already there."""
        ...

    def read_text(self, identifier: str) -> str:
        """Return the content stored under `identifier`."""
        ...

    def list_names(self, pattern: str) -> list[str]:
        """Return the identifiers matching `pattern` (`*` and `?` wildcards)."""
        ...
