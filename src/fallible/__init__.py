"""Fallible - outcomes of fallible operations as immutable values.

A Result is either a success carrying a value or a failure carrying an
optional diagnostic (any exception). Exceptions enter the model only at the
boundary constructors and leave it only through throw()/unwrap(), so the code
in between chains steps instead of nesting try/except.

Quick Start:
    >>> from fallible import Ok, Result, combine
    >>>
    >>> parsed = Result.get(lambda: int("42"))
    >>> parsed.map(lambda x: x + 1)
    Ok(43)
    >>> Result.get(lambda: int("x")).match(ok=str, err=lambda e: f"bad: {e}")
    "bad: invalid literal for int() with base 10: 'x'"

Validation:
    >>> Ok("").validate(lambda s: [] if s else ["empty"], ValueError).success
    False

Async:
    >>> from fallible import try_async, traverse_async
    >>>
    >>> async def load(key: str) -> Result[int]:
    ...     return await try_async(lambda: fetch(key))
    >>>
    >>> await traverse_async(["a", "b"], load)  # doctest: +SKIP

Aggregation:
    >>> combine([Ok(1), Ok(2)])
    Ok([1, 2])
"""

from __future__ import annotations

__version__ = "0.1.0"

# Diagnostics
from .errors import AggregateError, ErrorKind, ErrorReport, UnwrapError, classify_error

# Outcomes
from .monads import (
    UNDEFINED,
    Fail,
    Ok,
    Outcome,
    Partitioned,
    Resolved,
    Result,
    VoidResult,
    as_result,
    as_void_result,
    combine,
    not_none,
    partition,
    resolved,
    then,
    traverse_async,
    try_async,
    validate,
    when,
)

# Configuration
from .foundation.config import FallibleSettings, clear_settings_cache, get_settings

# Logging
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Diagnostics
    "AggregateError", "UnwrapError", "ErrorKind", "ErrorReport", "classify_error",
    # Outcomes
    "Outcome", "Result", "VoidResult", "UNDEFINED", "Ok", "Fail",
    # Validation
    "validate", "when", "not_none",
    # Async bridge
    "as_result", "as_void_result", "try_async", "then", "resolved", "Resolved",
    # Aggregation
    "combine", "partition", "traverse_async", "Partitioned",
    # Config & logging
    "FallibleSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
