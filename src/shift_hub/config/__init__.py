"""Configuration management for ShiftHub.

Usage:
    >>> from shift_hub.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.api_base_url)
"""

from shift_hub.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
