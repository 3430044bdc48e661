"""Configuration module using Pydantic Settings.

Usage:
    from typedcollection.config import GuardSettings, get_settings

    settings = get_settings()
    strict = GuardSettings(tuple_is_array=False)
"""

from typedcollection.config.settings import GuardSettings, get_settings

__all__ = [
    "GuardSettings",
    "get_settings",
]
