"""Configuration package."""

from habit_calendar.config.settings import (
    DEFAULT_STORAGE_KEY,
    AppSettings,
    DisplaySettings,
    Settings,
    StorageSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "AppSettings",
    "DisplaySettings",
    "Settings",
    "StorageSettings",
    "get_settings",
    "validate_all_settings",
]
