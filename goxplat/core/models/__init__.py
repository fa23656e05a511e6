"""
Domain models — Pydantic types for platform lookups.

    from goxplat.core.models import Platform, PlatformSet, Settings, platform_from_string
"""

from goxplat.core.models.platform import Platform, PlatformSet, platform_from_string
from goxplat.core.models.settings import Settings

__all__ = [
    # platform.py
    "Platform",
    "PlatformSet",
    "platform_from_string",
    # settings.py
    "Settings",
]
