"""Shared pytest fixtures for calcver tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from calcver.config import get_settings  # noqa: E402
from calcver.version import get_version  # noqa: E402


@pytest.fixture(autouse=True)
def clear_cached_state() -> Iterator[None]:
    """Start and finish every test with empty version and settings caches."""
    get_version.cache_clear()
    get_settings.cache_clear()
    yield
    get_version.cache_clear()
    get_settings.cache_clear()
