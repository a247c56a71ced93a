"""
Configuration package for the Lunch Roulette API.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    AzureMapsSettings,
    SearchPolicySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "AzureMapsSettings",
    "SearchPolicySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
