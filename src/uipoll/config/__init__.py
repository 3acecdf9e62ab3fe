"""Configuration package.

Settings are read from ``UIPOLL_*`` environment variables and ``.env``
files through pydantic-settings.

Usage:
    from uipoll.config import get_settings

    settings = get_settings()
    region = settings.default_region
"""

from .settings import PollerSettings, get_settings, reset_settings

__all__ = ["PollerSettings", "get_settings", "reset_settings"]
