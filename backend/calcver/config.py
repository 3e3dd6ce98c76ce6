"""Runtime configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PROGRAM_NAME = "calc"


@dataclass(frozen=True)
class Settings:
    """Settings sourced from environment variables."""

    program_name: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Construct settings using environment variables with sane defaults."""
        return cls(program_name=_load_program_name())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()


def _load_program_name() -> str:
    raw = os.getenv("CALC_PROGRAM_NAME", "").strip()
    return raw or DEFAULT_PROGRAM_NAME
