from __future__ import annotations

import codecs
import logging
from pathlib import Path

from .errors import NonexistentParentError, TextIOError, TextNotFoundError
from .interfaces import TextStore
from .patterns import has_wildcards, match_names, normalize_pattern, split_pattern
from .text_io import atomic_write_text, is_temp_name, read_text_file

logger = logging.getLogger(__name__)


class PersistentTextStore(TextStore):
    """
    Stores each text as a file; the identifier is the file path.

    - Holds no state besides its options, so any number of instances can
      address the same files.
    - Writes are atomic (temp file + replace) and byte-exact.
    - No caching and no locking: concurrent access to one path behaves the
      way the file system makes it behave.
    """

    def __init__(self, *, encoding: str = "utf-8", create_parents: bool = False):
        codecs.lookup(encoding)
        self._encoding = encoding
        self._create_parents = create_parents

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def create_parents(self) -> bool:
        return self._create_parents

    def write_text(self, identifier: str, content: str) -> None:
        path = Path(identifier)
        try:
            atomic_write_text(path, content, encoding=self._encoding, create_parents=self._create_parents)
        except (OSError, ValueError) as e:
            logger.warning("TEXT WRITE: failed to write %s: %r", identifier, e)
            raise TextIOError(identifier, f"cannot write {identifier!r}: {e}") from e
        logger.debug("TEXT WRITE: %s (%d chars)", identifier, len(content))

    def read_text(self, identifier: str) -> str:
        path = Path(identifier)
        try:
            content = read_text_file(path, encoding=self._encoding)
        except FileNotFoundError as e:
            raise TextNotFoundError(identifier) from e
        except (OSError, ValueError) as e:
            logger.warning("TEXT READ: failed to read %s: %r", identifier, e)
            raise TextIOError(identifier, f"cannot read {identifier!r}: {e}") from e
        logger.debug("TEXT READ: %s (%d chars)", identifier, len(content))
        return content

    def list_names(self, pattern: str) -> list[str]:
        if not has_wildcards(pattern):
            return [pattern] if Path(normalize_pattern(pattern)).is_file() else []

        parent, name = split_pattern(pattern)
        directory = Path(parent)
        if not directory.is_dir():
            raise NonexistentParentError(pattern)

        try:
            files = {
                entry.name: entry
                for entry in directory.iterdir()
                if entry.is_file() and not is_temp_name(entry.name)
            }
        except OSError as e:
            logger.warning("TEXT LIST: failed to list %s: %r", directory, e)
            raise TextIOError(pattern, f"cannot list {str(directory)!r}: {e}") from e
        return [str(files[n]) for n in match_names(files, name)]
