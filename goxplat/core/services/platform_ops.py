"""
Platform operations — resolve a Go version string to its target list.

Pure lookups over the static history in ``goxplat.core.data.platforms``.
Version parsing and range checks are delegated to ``packaging``.

Queries never raise: anything that isn't a recognisable ``goX.Y[.Z]``
version falls back to the newest known snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from goxplat.core.data.platforms import (
    LATEST_RELEASE,
    SNAPSHOTS,
    PlatformTableError,
)
from goxplat.core.models.platform import PlatformSet

logger = logging.getLogger(__name__)

_GO_PREFIX = "go"

# (constraint, release) — one entry per minor release, oldest first.
# Ranges must not overlap; the first match wins.
_VERSION_RANGES: tuple[tuple[str, str], ...] = (
    ("<=1.0", "1.0"),
    (">=1.1, <1.3", "1.1"),
    (">=1.3, <1.4", "1.3"),
    (">=1.4, <1.5", "1.4"),
    (">=1.5, <1.6", "1.5"),
    (">=1.6, <1.7", "1.6"),
    (">=1.7, <1.8", "1.7"),
    (">=1.8, <1.9", "1.8"),
    (">=1.9, <1.10", "1.9"),
    (">=1.10, <1.11", "1.10"),
    (">=1.11, <1.12", "1.11"),
    (">=1.12, <1.13", "1.12"),
    (">=1.13, <1.14", "1.13"),
    (">=1.14, <1.15", "1.14"),
    (">=1.15, <1.16", "1.15"),
    (">=1.16, <1.17", "1.16"),
    (">=1.17, <1.18", "1.17"),
    (">=1.18, <1.19", "1.18"),
)


@dataclass(frozen=True)
class VersionRange:
    """One row of the resolution table."""

    constraint: str
    release: str
    specifier: SpecifierSet

    @property
    def platforms(self) -> PlatformSet:
        return SNAPSHOTS[self.release]

    def contains(self, version: Version) -> bool:
        return self.specifier.contains(version)

    def to_dict(self) -> dict[str, Any]:
        return {
            "constraint": self.constraint,
            "release": self.release,
            "platform_count": len(self.platforms),
        }


def build_resolution_table(
    ranges: Iterable[tuple[str, str]] = _VERSION_RANGES,
    snapshots: Mapping[str, PlatformSet] = SNAPSHOTS,
) -> tuple[VersionRange, ...]:
    """Parse every range constraint once.

    Raises:
        PlatformTableError: A constraint is malformed or names a release
            with no snapshot.
    """
    table: list[VersionRange] = []
    for constraint, release in ranges:
        if release not in snapshots:
            raise PlatformTableError(
                f"Range {constraint!r} points at unknown release {release!r}"
            )
        try:
            specifier = SpecifierSet(constraint)
        except InvalidSpecifier as e:
            raise PlatformTableError(
                f"Malformed version range {constraint!r} for release {release}: {e}"
            ) from e
        table.append(VersionRange(constraint=constraint, release=release, specifier=specifier))
    return tuple(table)


_RESOLUTION_TABLE: tuple[VersionRange, ...] = build_resolution_table()


def resolution_table() -> tuple[VersionRange, ...]:
    """Return the version → snapshot table, oldest release first."""
    return _RESOLUTION_TABLE


def resolve_release(version: str) -> str:
    """Return the snapshot release name that applies to ``version``.

    Args:
        version: A Go version string as printed by ``go version``,
            e.g. ``"go1.16.3"``.

    Returns:
        The matching release name, or the newest release when the
        string is not a Go version, fails to parse, or is newer than
        anything in the table.
    """
    if not version.startswith(_GO_PREFIX):
        logger.debug("Not a Go version string %r, assuming latest", version)
        return LATEST_RELEASE

    raw = version[len(_GO_PREFIX):]
    if raw != raw.strip():
        logger.warning("Unable to parse Go version %r: surrounding whitespace", raw)
        return LATEST_RELEASE

    try:
        parsed = Version(raw)
    except InvalidVersion as e:
        logger.warning("Unable to parse Go version %r: %s", raw, e)
        return LATEST_RELEASE

    # ranges hold no pre-releases, so go1.18beta1 matches no row
    if parsed.is_prerelease:
        logger.debug("Go pre-release %s is outside every range, assuming latest", parsed)
        return LATEST_RELEASE

    for entry in _RESOLUTION_TABLE:
        if entry.contains(parsed):
            return entry.release

    logger.debug("Go version %s is outside the known history, assuming latest", parsed)
    return LATEST_RELEASE


def supported_platforms(version: str) -> PlatformSet:
    """Return every platform the given Go version can target.

    The returned tuple is shared process-wide data.
    """
    return SNAPSHOTS[resolve_release(version)]


def default_platforms(version: str) -> PlatformSet:
    """Return the platforms built when no target is requested."""
    return tuple(p for p in supported_platforms(version) if p.default)
