from __future__ import annotations

import codecs
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Backend selection (default: in-memory, nothing touches the disk)
    persist_to_disk: bool = False

    # Persistent backend options
    encoding: str = "utf-8"
    create_parents: bool = False

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value!r}") from e
        return value


def get_settings(env_file: str | None = "local.env") -> Settings:
    if env_file:
        load_dotenv(env_file)

    return Settings(
        persist_to_disk=_env_bool("TEXTSTORE_PERSIST_TO_DISK", False),
        encoding=os.getenv("TEXTSTORE_ENCODING", "utf-8").strip(),
        create_parents=_env_bool("TEXTSTORE_CREATE_PARENTS", False),
    )
