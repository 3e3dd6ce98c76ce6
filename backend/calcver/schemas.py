"""Pydantic schemas describing the build-time version fields."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VersionFields(BaseModel):
    """The four fields the version string is formed from."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch_level: int = Field(default=0, ge=0)
    patch_tag: str = ""
