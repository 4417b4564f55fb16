"""
Configuration package for the trip planner.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    StorageBackendType,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "StorageBackendType",
    "settings",
    "get_settings",
    "reload_settings",
]
