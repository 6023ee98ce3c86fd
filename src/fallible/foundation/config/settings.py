"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fallible.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.report.summary_limit
    5
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # FALLIBLE_LOG_LEVEL=DEBUG
    # FALLIBLE_REPORT_INCLUDE_TRACEBACK=true
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger("fallible.config")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    absorbed: bool = Field(default=True, description="Log exceptions absorbed at boundaries")


class ReportSettings(BaseSettings):
    """Diagnostic rendering configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_REPORT_",
        extra="ignore",
    )

    include_traceback: bool = Field(default=False, description="Attach formatted tracebacks to reports")
    summary_limit: PositiveInt = Field(default=5, description="Causes listed in aggregate summaries")


class FallibleSettings(BaseSettings):
    """Root settings, loaded from ``FALLIBLE_`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached). Raises ValidationError on bad env values."""
    return FallibleSettings()


@lru_cache(maxsize=1)
def runtime_settings() -> FallibleSettings:
    """Settings for library internals; never raises.

    Falls back to the defaults when the environment does not validate, logging
    a warning once per cache lifetime.
    """
    try:
        return get_settings()
    except ValidationError as e:
        logger.warning(f"invalid FALLIBLE_ settings, using defaults: {e.error_count()} error(s): {e}")
        return FallibleSettings.model_construct(
            logging=LoggingSettings.model_construct(),
            report=ReportSettings.model_construct(),
        )


def clear_settings_cache() -> None:
    """Clear the settings cache so the next lookup reloads the environment."""
    get_settings.cache_clear()
    runtime_settings.cache_clear()
