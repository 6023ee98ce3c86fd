"""Foundation - configuration shared by the rest of fallible."""

from .config import FallibleSettings, clear_settings_cache, get_settings

__all__ = ["FallibleSettings", "get_settings", "clear_settings_cache"]
