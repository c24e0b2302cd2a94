"""
Configuration package for the Wanderlog backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SecuritySettings,
    StorageSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SecuritySettings",
    "StorageSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
