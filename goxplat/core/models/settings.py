"""
Settings model — defaults for the CLI, read from goxplat.yml.

Every field is optional: without a config file the CLI resolves against
the newest known Go release and selects the default platforms.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Validated contents of goxplat.yml."""

    model_config = ConfigDict(extra="forbid")

    go_version: str | None = None        # e.g. "go1.16"; None means latest
    os: list[str] = Field(default_factory=list)
    arch: list[str] = Field(default_factory=list)
    osarch: list[str] = Field(default_factory=list)
    log_level: str | None = None
