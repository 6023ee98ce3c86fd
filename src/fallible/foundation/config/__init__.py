"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    FallibleSettings,
    LoggingSettings,
    ReportSettings,
    clear_settings_cache,
    get_settings,
    runtime_settings,
)

__all__ = [
    "FallibleSettings",
    "LoggingSettings",
    "ReportSettings",
    "clear_settings_cache",
    "get_settings",
    "runtime_settings",
]
