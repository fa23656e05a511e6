"""
L0 Data — Go toolchain platform history.

One snapshot per Go release that changed the list of supported
cross-compilation targets. Each snapshot is derived from an older one
with ``add_drop`` so the history reads as a changelog.

Source: https://go.dev/doc/devel/release and the per-release notes.

The chain is built once at import by ``build_snapshots()``, oldest
release first, and exposed read-only through ``SNAPSHOTS``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from goxplat.core.models.platform import Platform, PlatformSet

logger = logging.getLogger(__name__)


class PlatformTableError(Exception):
    """Raised when the static platform history is inconsistent."""


# Known values as of the newest snapshot. Informational only,
# platform strings are never validated against these.
OS_LIST: tuple[str, ...] = (
    "aix",
    "android",
    "darwin",
    "dragonfly",
    "freebsd",
    "illumos",
    "js",
    "linux",
    "nacl",
    "netbsd",
    "openbsd",
    "plan9",
    "solaris",
    "windows",
)

ARCH_LIST: tuple[str, ...] = (
    "386",
    "amd64",
    "amd64p32",
    "arm",
    "arm64",
    "mips",
    "mipsle",
    "mips64",
    "mips64le",
    "ppc64",
    "ppc64le",
    "riscv64",
    "s390x",
    "wasm",
)


def _plat(os: str, arch: str, default: bool = False, arm: str = "") -> Platform:
    return Platform(os=os, arch=arch, arm_version=arm, default=default)


def add_drop(
    base: Iterable[Platform],
    add: Iterable[Platform] = (),
    drop: Iterable[Platform] = (),
) -> PlatformSet:
    """Append ``add`` to ``base``, then remove each ``drop`` entry.

    Removal matches on ``(os, arch)`` only and deletes the first match.
    With several ARM variants of one pair, a single drop removes only
    the first of them. Additions are not de-duplicated.

    Raises:
        PlatformTableError: A drop entry matches nothing.
    """
    platforms = [*base, *add]

    # linear scan per drop, runs once per snapshot at import
    for target in drop:
        for i, platform in enumerate(platforms):
            if platform.key == target.key:
                del platforms[i]
                break
        else:
            raise PlatformTableError(
                f"Expected to remove {target} but it is not in "
                f"[{', '.join(str(p) for p in platforms)}]"
            )

    return tuple(platforms)


# ── Release history ─────────────────────────────────────────────

PLATFORMS_1_0: PlatformSet = (
    _plat("darwin", "386", True),
    _plat("darwin", "amd64", True),
    _plat("linux", "386", True),
    _plat("linux", "amd64", True),
    _plat("linux", "arm", True, arm="5"),
    _plat("linux", "arm", True, arm="6"),
    _plat("linux", "arm", True, arm="7"),
    _plat("linux", "arm", True, arm="8"),
    _plat("freebsd", "386", True),
    _plat("freebsd", "amd64", True),
    _plat("openbsd", "386", True),
    _plat("openbsd", "amd64", True),
    _plat("windows", "386", True),
    _plat("windows", "amd64", True),
)

# Added in 1.6, re-added on top of 1.5 by 1.7 with mips64 promoted.
_ADDED_1_6: PlatformSet = (
    _plat("android", "386"),
    _plat("android", "amd64"),
    _plat("linux", "mips64"),
    _plat("linux", "mips64le"),
    _plat("nacl", "386"),
    _plat("openbsd", "arm", True),
)


def build_snapshots() -> dict[str, PlatformSet]:
    """Build every snapshot in release order.

    Returns:
        Release name (``"1.0"`` .. ``"1.18"``) → platform set, in
        insertion order oldest first.

    Raises:
        PlatformTableError: A drop entry does not exist in its base.
    """
    snapshots: dict[str, PlatformSet] = {"1.0": PLATFORMS_1_0}

    snapshots["1.1"] = add_drop(snapshots["1.0"], add=(
        _plat("freebsd", "arm", True),
        _plat("netbsd", "386", True),
        _plat("netbsd", "amd64", True),
        _plat("netbsd", "arm", True),
        _plat("plan9", "386"),
    ))

    snapshots["1.3"] = add_drop(snapshots["1.1"], add=(
        _plat("dragonfly", "386"),
        _plat("dragonfly", "amd64"),
        _plat("nacl", "amd64"),
        _plat("nacl", "amd64p32"),
        _plat("nacl", "arm"),
        _plat("solaris", "amd64"),
    ))

    snapshots["1.4"] = add_drop(snapshots["1.3"], add=(
        _plat("android", "arm"),
        _plat("plan9", "amd64"),
    ))

    snapshots["1.5"] = add_drop(snapshots["1.4"], add=(
        _plat("darwin", "arm"),
        _plat("darwin", "arm64"),
        _plat("linux", "arm64"),
        _plat("linux", "ppc64"),
        _plat("linux", "ppc64le"),
    ))

    snapshots["1.6"] = add_drop(snapshots["1.5"], add=_ADDED_1_6)

    # Built on 1.5 so the 1.6 additions can change their default flag.
    snapshots["1.7"] = add_drop(snapshots["1.5"], add=(
        # not fully supported, but generally useful
        _plat("linux", "s390x", True),
        _plat("plan9", "arm"),
        *(
            p.model_copy(update={"default": True}) if p.os == "linux" else p
            for p in _ADDED_1_6
        ),
    ))

    snapshots["1.8"] = add_drop(snapshots["1.7"], add=(
        _plat("linux", "mips", True),
        _plat("linux", "mipsle", True),
    ))

    snapshots["1.9"] = snapshots["1.8"]

    # unannounced
    snapshots["1.10"] = add_drop(snapshots["1.9"], drop=(
        _plat("android", "amd64"),
    ))

    snapshots["1.11"] = add_drop(snapshots["1.10"], add=(
        _plat("js", "wasm", True),
    ))

    snapshots["1.12"] = add_drop(snapshots["1.11"], add=(
        _plat("aix", "ppc64"),
        _plat("windows", "arm", True),
    ))

    snapshots["1.13"] = add_drop(snapshots["1.12"], add=(
        _plat("illumos", "amd64"),
        _plat("netbsd", "arm64", True),
        _plat("openbsd", "arm64", True),
    ))

    snapshots["1.14"] = add_drop(
        snapshots["1.13"],
        add=(
            _plat("freebsd", "arm64", True),
            _plat("linux", "riscv64", True),
        ),
        drop=(
            _plat("nacl", "386"),
            _plat("nacl", "amd64"),
            _plat("nacl", "arm"),
        ),
    )

    snapshots["1.15"] = add_drop(
        snapshots["1.14"],
        add=(_plat("android", "arm64"),),
        drop=(_plat("darwin", "386"),),
    )

    snapshots["1.16"] = add_drop(snapshots["1.15"], add=(
        _plat("android", "amd64"),
        _plat("darwin", "arm64", True),
        _plat("openbsd", "mips64"),
    ))

    snapshots["1.17"] = add_drop(snapshots["1.16"], add=(
        _plat("windows", "arm64", True),
    ))

    snapshots["1.18"] = snapshots["1.17"]

    for name, platforms in snapshots.items():
        if not platforms:
            raise PlatformTableError(f"Snapshot {name} is empty")

    logger.debug("Built %d platform snapshots", len(snapshots))
    return snapshots


_snapshots = build_snapshots()

SNAPSHOTS: MappingProxyType[str, PlatformSet] = MappingProxyType(_snapshots)

LATEST_RELEASE: str = list(_snapshots)[-1]
PLATFORMS_LATEST: PlatformSet = SNAPSHOTS[LATEST_RELEASE]
