from __future__ import annotations

import re
from fnmatch import fnmatchcase
from pathlib import PurePosixPath
from typing import Iterable

from .errors import WildcardInParentError

_WILDCARDS = re.compile(r"[?*]")


def has_wildcards(name: str) -> bool:
    return _WILDCARDS.search(name) is not None


def normalize_pattern(pattern: str) -> str:
    # Windows separators would otherwise end up inside a single component.
    return pattern.replace("\\", "/")


def split_pattern(pattern: str) -> tuple[PurePosixPath, str]:
    """
    Split a path pattern into its directory part and its last component.

    Raises WildcardInParentError if any component before the last one
    contains a wildcard.
    """
    path = PurePosixPath(normalize_pattern(pattern))
    for part in path.parts[:-1]:
        if has_wildcards(part):
            raise WildcardInParentError(pattern)
    return path.parent, path.name


def match_names(names: Iterable[str], pattern: str) -> list[str]:
    return sorted(n for n in names if fnmatchcase(n, pattern))
