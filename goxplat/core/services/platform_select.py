"""
Platform selection — narrow a supported list with include/exclude filters.

Filters come in three flavours, each a list of strings where a leading
``!`` turns the entry into an exclusion:

    os_filters      ["linux", "!windows"]
    arch_filters    ["amd64", "arm", "!armv5"]
    osarch_filters  ["darwin/arm64", "!linux/386"]

With no inclusions at all, the default platforms are selected. Arch
filters match either the bare arch (``arm`` matches every ARM variant) or
the canonical arch (``armv7``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from goxplat.core.models.platform import Platform, PlatformSet, platform_from_string

logger = logging.getLogger(__name__)

_NEGATE = "!"


@dataclass
class _FilterSet:
    include: set[str] = field(default_factory=set)
    exclude: set[str] = field(default_factory=set)

    def add(self, value: str) -> None:
        if value.startswith(_NEGATE):
            self.exclude.add(value[len(_NEGATE):])
        elif value:
            self.include.add(value)


def _split(values: Iterable[str]) -> _FilterSet:
    fs = _FilterSet()
    for value in values:
        fs.add(value.strip())
    return fs


def _split_osarch(values: Iterable[str]) -> _FilterSet:
    """Normalise ``os/arch`` entries to canonical platform strings."""
    fs = _FilterSet()
    for value in values:
        value = value.strip()
        negate = value.startswith(_NEGATE)
        if negate:
            value = value[len(_NEGATE):]
        parts = value.split("/")
        if len(parts) != 2 or not all(parts):
            logger.debug("Ignoring malformed os/arch filter %r", value)
            continue
        canonical = str(platform_from_string(parts[0], parts[1]))
        (fs.exclude if negate else fs.include).add(canonical)
    return fs


def _arch_matches(platform: Platform, arches: set[str]) -> bool:
    return platform.arch in arches or platform.arch_string in arches


def select_platforms(
    supported: Iterable[Platform],
    *,
    os_filters: Iterable[str] = (),
    arch_filters: Iterable[str] = (),
    osarch_filters: Iterable[str] = (),
) -> PlatformSet:
    """Pick the platforms to build from ``supported``.

    Args:
        supported: Platforms available for the toolchain, usually
            ``supported_platforms(version)``.
        os_filters: OS names, ``!``-prefixed to exclude.
        arch_filters: Arch names, ``!``-prefixed to exclude.
        osarch_filters: ``os/arch`` pairs, ``!``-prefixed to exclude.

    Returns:
        Selected platforms in ``supported`` order, one per canonical
        ``os/arch`` string. The input is not modified.
    """
    oses = _split(os_filters)
    arches = _split(arch_filters)
    osarches = _split_osarch(osarch_filters)

    has_includes = bool(oses.include or arches.include or osarches.include)
    by_dimension = bool(oses.include or arches.include)

    selected: list[Platform] = []
    seen: set[str] = set()
    for platform in supported:
        name = str(platform)
        if name in seen:
            continue

        if not has_includes:
            wanted = platform.default
        else:
            wanted = name in osarches.include or (
                by_dimension
                and (not oses.include or platform.os in oses.include)
                and (not arches.include or _arch_matches(platform, arches.include))
            )
        if not wanted:
            continue

        if (
            platform.os in oses.exclude
            or _arch_matches(platform, arches.exclude)
            or name in osarches.exclude
        ):
            continue

        seen.add(name)
        selected.append(platform)

    logger.debug("Selected %d of the supported platforms", len(selected))
    return tuple(selected)
