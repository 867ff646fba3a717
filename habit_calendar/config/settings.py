"""
Configuration Management for Habit Calendar

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every group has its own env prefix so the storage location and the
display variant can be changed without touching code.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_STORAGE_KEY = "dailyHabitsAppData_v1"


class StorageSettings(BaseSettings):
    """Where the habit document is persisted."""

    model_config = SettingsConfigDict(
        env_prefix="HABITS_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: Literal["file", "memory"] = Field(
        default="file",
        description="Slot backend: a JSON file on disk or process memory"
    )
    data_dir: str = Field(
        default="data",
        description="Directory holding the JSON document"
    )
    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY,
        min_length=1,
        description="Key of the slot the document is stored under"
    )

    @field_validator('storage_key')
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        """The key becomes a file name, so path separators are not allowed."""
        if "/" in v or "\\" in v:
            raise ValueError("storage_key must not contain path separators")
        return v

    @property
    def document_path(self) -> Path:
        """Full path of the JSON file backing the slot."""
        return Path(self.data_dir) / f"{self.storage_key}.json"


class DisplaySettings(BaseSettings):
    """
    Calendar display options.

    Covers both layouts of the tracker: the plain calendar and the
    colored calendar with a separate habit list panel.
    """

    model_config = SettingsConfigDict(
        env_prefix="HABITS_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    show_habit_list: bool = Field(
        default=False,
        description="Show the habit list panel next to the calendar"
    )
    color_cycle: bool = Field(
        default=False,
        description="Assign each new habit one of five row colors in turn"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (shows recent activity in the sidebar)"
    )
    log_level: str = Field(
        default="INFO",
        description="Standard library logging level"
    )

    # Audit
    audit_history_size: int = Field(
        default=200,
        ge=1,
        le=10000,
        description="How many audit events the in-memory store keeps"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Sub-settings are loaded lazily to allow partial configuration

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def display(self) -> DisplaySettings:
        return DisplaySettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for every group that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "display", "app"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
