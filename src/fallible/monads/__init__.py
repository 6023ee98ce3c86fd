"""Outcome types and their combinators.

Provides Result/VoidResult for chaining fallible steps without nested
try/except:
- Boundary absorption: Result.get, as_result, try_async
- Transformation and chaining: map, bind, match, on_success
- Validation: validate, when, not_none
- Async bridging: map_async, bind_async, then, resolved
- Aggregation: combine, partition, traverse_async

Example:
    >>> from fallible.monads import Result, Ok
    >>>
    >>> result = (
    ...     Result.get(lambda: int("21"))
    ...     .map(lambda x: x * 2)
    ...     .when(lambda x: x > 0, lambda x: ValueError(f"{x} is not positive"))
    ... )
    >>> assert result.unwrap() == 42
"""

from .aggregate import Partitioned, combine, partition, traverse_async
from .aio import Resolved, as_result, as_void_result, resolved, then, try_async
from .result import UNDEFINED, Fail, Ok, Outcome, Result, VoidResult
from .validation import not_none, validate, when

__all__ = [
    # Core types
    "Outcome", "Result", "VoidResult", "UNDEFINED",
    # Constructors
    "Ok", "Fail",
    # Validation
    "validate", "when", "not_none",
    # Async bridge
    "as_result", "as_void_result", "try_async", "then", "resolved", "Resolved",
    # Aggregation
    "combine", "partition", "traverse_async", "Partitioned",
]
