from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import textstore` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


from textstore import InMemoryTextStore, PersistentTextStore, TextStore  # noqa: E402


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Remove TEXTSTORE_* variables so settings tests only see what they set.
    """
    for name in ("TEXTSTORE_PERSIST_TO_DISK", "TEXTSTORE_ENCODING", "TEXTSTORE_CREATE_PARENTS"):
        # setenv first so teardown also removes values load_dotenv() wrote directly.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(params=["disk", "memory"])
def store_and_ident(request: pytest.FixtureRequest, tmp_path: Path) -> tuple[TextStore, Callable[[str], str]]:
    """
    A store of either kind plus a function turning a short name into an identifier
    valid for that store (a path under tmp_path for disk, the name itself for memory).
    """
    if request.param == "disk":
        return PersistentTextStore(), lambda name: str(tmp_path / name)
    return InMemoryTextStore(), lambda name: name
