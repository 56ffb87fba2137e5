"""
Configuration Module

Engine configuration settings.
"""

from surplus.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
