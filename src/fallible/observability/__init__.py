"""Observability hooks: stdlib logging under the ``fallible`` logger."""

from .logging import configure_logging, get_logger, log_absorbed, log_handler_failure

__all__ = ["configure_logging", "get_logger", "log_absorbed", "log_handler_failure"]
