from __future__ import annotations

import os
import re
import uuid
from pathlib import Path

_TMP_NAME = re.compile(r"^\.[0-9a-f]{32}\.tmp$")


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    No newline translation is applied. Raises OSError or UnicodeDecodeError
    unchanged.
    """
    with path.open("r", encoding=encoding, newline="") as f:
        return f.read()


def is_temp_name(name: str) -> bool:
    """True for the names atomic_write_text gives its in-flight temp files."""
    return _TMP_NAME.match(name) is not None


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8", create_parents: bool = False) -> None:
    """
    Atomically write text to disk by writing to a temp file then replacing.

    The temp file lives next to the target so the final replace stays on one
    file system. Its name has a fixed length, independent of the target's. It
    is removed again if the write or the replace fails.

    The target is replaced, not rewritten in place: a symlink at `path`
    becomes a regular file (the link's destination is left untouched), and
    an existing file's permission bits are reset to the default for new files.
    """
    if not path.name:
        raise ValueError(f"{str(path)!r} does not name a file")
    if create_parents:
        path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.parent / f".{uuid.uuid4().hex}.tmp"
    try:
        with tmp_path.open("w", encoding=encoding, newline="") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
