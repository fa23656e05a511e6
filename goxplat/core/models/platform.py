"""
Platform model — one OS/architecture cross-compilation target.

A platform is identified by its ``(os, arch)`` pair. ARM targets carry
an optional sub-version (``"5"`` .. ``"8"``) that is rendered back into
the canonical arch string (``linux/armv7``).

``default`` is a curation flag set at data-entry time: default targets are
the ones built when the caller doesn't ask for anything specific. Rare
combinations (Android, Plan 9, ...) are supported but not default.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

_ARM_PREFIX = "armv"


class Platform(BaseModel):
    """An immutable OS/arch build target."""

    model_config = ConfigDict(frozen=True)

    os: str
    arch: str
    arm_version: str = ""        # only meaningful when arch == "arm"
    default: bool = False

    @property
    def key(self) -> tuple[str, str]:
        """Identity used for lookup and removal matching."""
        return (self.os, self.arch)

    @property
    def arm_suffix(self) -> str:
        return f"v{self.arm_version}" if self.arm_version else ""

    @property
    def arch_string(self) -> str:
        """Canonical arch, e.g. ``amd64`` or ``armv7``."""
        return f"{self.arch}{self.arm_suffix}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": str(self),
            "os": self.os,
            "arch": self.arch,
            "arm_version": self.arm_version,
            "default": self.default,
        }

    def __str__(self) -> str:
        return f"{self.os}/{self.arch_string}"


PlatformSet = tuple[Platform, ...]


def platform_from_string(os: str, arch: str) -> Platform:
    """Build a Platform from a raw ``(os, arch)`` pair.

    ``armvN`` arch strings are split into ``arch="arm"`` plus the ARM
    version. Anything else, including a bare ``arm``, is kept verbatim.
    """
    if arch.startswith(_ARM_PREFIX) and len(arch) >= 5:
        return Platform(os=os, arch="arm", arm_version=arch[len(_ARM_PREFIX):])
    return Platform(os=os, arch=arch)
