"""
goxplat — which OS/arch targets can a given Go toolchain build for?

    from goxplat import supported_platforms, platform_from_string

    supported_platforms("go1.16")          # tuple[Platform, ...]
    str(platform_from_string("linux", "armv7"))   # "linux/armv7"
"""

__version__ = "0.1.0"

from goxplat.core.models.platform import Platform, PlatformSet, platform_from_string  # noqa: E402
from goxplat.core.services.platform_ops import (  # noqa: E402
    default_platforms,
    supported_platforms,
)

__all__ = [
    "Platform",
    "PlatformSet",
    "__version__",
    "default_platforms",
    "platform_from_string",
    "supported_platforms",
]
