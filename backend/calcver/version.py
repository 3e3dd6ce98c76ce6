"""Form and cache the calc version string.

The string never contains the program title, only one of::

    x.y.ztsomething
    x.y.z
    x.y
"""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from pydantic import ValidationError

from .config import get_settings
from .logging_utils import get_logger
from .schemas import VersionFields

logger = get_logger("version")

MAJOR_VER: Final[int] = 2  # major version
MINOR_VER: Final[int] = 10  # minor version
MAJOR_PATCH: Final[int] = 3  # patch level or 0 if no patch
MINOR_PATCH: Final[str] = "t5.46"  # test number or empty string if no patch


class VersionError(RuntimeError):
    """Raised when the version fields cannot be assembled."""


def build_version_fields(
    major: int, minor: int, patch_level: int = 0, patch_tag: str = ""
) -> VersionFields:
    """Validate raw version components and return them as VersionFields."""
    try:
        return VersionFields(
            major=major, minor=minor, patch_level=patch_level, patch_tag=patch_tag
        )
    except ValidationError as error:
        program = get_settings().program_name
        logger.error(
            "Rejected version fields %r", (major, minor, patch_level, patch_tag)
        )
        raise VersionError(
            f"{program}: invalid version fields: {error.error_count()} error(s)"
        ) from error


VERSION_FIELDS: Final[VersionFields] = build_version_fields(
    MAJOR_VER, MINOR_VER, MAJOR_PATCH, MINOR_PATCH
)


def format_version(fields: VersionFields) -> str:
    """Return the version string for the given fields."""
    if fields.patch_tag:
        return f"{fields.major}.{fields.minor}.{fields.patch_level}{fields.patch_tag}"
    if fields.patch_level > 0:
        # Historically this branch printed the (empty) tag in place of the patch
        # level, yielding "x.y."; the numeric level is rendered instead.
        return f"{fields.major}.{fields.minor}.{fields.patch_level}"
    return f"{fields.major}.{fields.minor}"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the version string, forming it on the first call only."""
    version = format_version(VERSION_FIELDS)
    logger.debug("Formed version string %s", version)
    return version
