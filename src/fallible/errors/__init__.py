"""Diagnostics for failed outcomes.

- AggregateError: ordered container of causes, nestable
- UnwrapError: checked unwrap on a failure without diagnostic
- ErrorKind/classify_error: coarse diagnostic categories
- ErrorReport: structured, serialisable snapshot of a diagnostic
"""

from .errors import AggregateError, ErrorKind, UnwrapError, classify_error
from .types import ErrorReport

__all__ = [
    "AggregateError", "UnwrapError",
    "ErrorKind", "classify_error",
    "ErrorReport",
]
