"""Logging for boundary absorption.

The library installs no handlers; applications attach their own to the
``fallible`` logger or call configure_logging() to apply the configured level.
"""

from __future__ import annotations

import logging

from ..errors import classify_error
from ..foundation.config import runtime_settings

logger = logging.getLogger("fallible")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the root ``fallible`` logger or a named child of it."""
    return logger.getChild(name) if name else logger


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the ``fallible`` logger level, defaulting to ``FALLIBLE_LOG_LEVEL``."""
    level = (level or runtime_settings().logging.level).upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))
    return logger


def log_absorbed(operation: str, error: BaseException) -> None:
    """Record an exception converted into a failed outcome."""
    if not runtime_settings().logging.absorbed or not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(f"[{operation}] absorbed {classify_error(error)} {type(error).__name__}: {error}")


def log_handler_failure(error: BaseException | None, handler_error: BaseException) -> None:
    """Record a failure handler that raised while handling ``error``."""
    logger.warning(
        f"[when_failed] handler raised {type(handler_error).__name__}: {handler_error} "
        f"while handling {type(error).__name__}"
    )
