"""
Static data — the Go platform history.

Built once at import, read-only afterwards::

    from goxplat.core.data import SNAPSHOTS, PLATFORMS_LATEST

    SNAPSHOTS["1.14"]    # tuple[Platform, ...]
"""

from goxplat.core.data.platforms import (
    ARCH_LIST,
    LATEST_RELEASE,
    OS_LIST,
    PLATFORMS_LATEST,
    SNAPSHOTS,
    PlatformTableError,
    add_drop,
    build_snapshots,
)

__all__ = [
    "ARCH_LIST",
    "LATEST_RELEASE",
    "OS_LIST",
    "PLATFORMS_LATEST",
    "SNAPSHOTS",
    "PlatformTableError",
    "add_drop",
    "build_snapshots",
]
