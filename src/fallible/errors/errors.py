"""Diagnostics carried by failed outcomes.

Provides the aggregate diagnostic used wherever several causes must survive
together, the error raised by checked unwrap, and a coarse classification of
diagnostics for reports and logs.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_ABSENT_LABEL = "<unknown failure>"


def _label(error: BaseException | None) -> str:
    if error is None:
        return _ABSENT_LABEL
    text = str(error)
    return f"{type(error).__name__}: {text}" if text else type(error).__name__


class AggregateError(Exception):
    """Ordered collection of underlying causes, kept as one diagnostic.

    Members may be ``None`` where a failure carried no diagnostic, and may
    themselves be aggregates. Nothing is dropped or deduplicated.

    Example:
        >>> err = AggregateError([ValueError("a"), None])
        >>> len(err)
        2
        >>> str(err)
        '2 errors occurred: (ValueError: a) (<unknown failure>)'
    """

    def __init__(self, errors: Iterable[Exception | None], message: str | None = None) -> None:
        self.errors: tuple[Exception | None, ...] = tuple(errors)
        self._message = message
        super().__init__(self.errors, message)

    def summary(self) -> str:
        """One-line description listing the first few causes."""
        from ..foundation.config import runtime_settings

        limit = runtime_settings().report.summary_limit
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        shown = " ".join(f"({_label(e)})" for e in self.errors[:limit])
        more = f" (+{count - limit} more)" if count > limit else ""
        return f"{count} {noun} occurred: {shown}{more}" if count else "0 errors occurred"

    def flatten(self) -> tuple[Exception | None, ...]:
        """Expand nested aggregates depth-first, keeping order and placeholders."""
        flat: list[Exception | None] = []
        for error in self.errors:
            if isinstance(error, AggregateError):
                flat.extend(error.flatten())
            else:
                flat.append(error)
        return tuple(flat)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[Exception | None]:
        return iter(self.errors)

    def __str__(self) -> str:
        return self._message or self.summary()

    def __repr__(self) -> str:
        return f"AggregateError({list(self.errors)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash((AggregateError, self.errors))


class UnwrapError(RuntimeError):
    """Raised by ``unwrap()`` on a failure that carries no diagnostic."""


class ErrorKind(StrEnum):
    """Coarse category of a diagnostic."""
    ABSENT = "ABSENT"
    AGGREGATE = "AGGREGATE"
    TIMEOUT = "TIMEOUT"
    NETWORK = "NETWORK"
    PERMISSION = "PERMISSION"
    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    PARSE = "PARSE"
    UNKNOWN = "UNKNOWN"


# Checked in order; subclasses before their bases
_TYPE_KINDS: tuple[tuple[type[BaseException], ErrorKind], ...] = (
    (TimeoutError, ErrorKind.TIMEOUT),
    (PermissionError, ErrorKind.PERMISSION),
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (ConnectionError, ErrorKind.NETWORK),
    (LookupError, ErrorKind.NOT_FOUND),
    (UnicodeError, ErrorKind.PARSE),
    (ValueError, ErrorKind.INVALID),
    (TypeError, ErrorKind.INVALID),
)

_PATTERN_KINDS: dict[str, ErrorKind] = {
    "timeout": ErrorKind.TIMEOUT,
    "timed out": ErrorKind.TIMEOUT,
    "connection": ErrorKind.NETWORK,
    "network": ErrorKind.NETWORK,
    "permission": ErrorKind.PERMISSION,
    "forbidden": ErrorKind.PERMISSION,
    "notfound": ErrorKind.NOT_FOUND,
    "not found": ErrorKind.NOT_FOUND,
    "parse": ErrorKind.PARSE,
    "json": ErrorKind.PARSE,
    "decode": ErrorKind.PARSE,
    "validation": ErrorKind.INVALID,
    "invalid": ErrorKind.INVALID,
}
_PATTERN_KEYS = tuple(_PATTERN_KINDS)


@lru_cache(maxsize=256)
def _classify_cached(signature: str) -> ErrorKind:
    haystack = signature.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_KINDS[pattern]
    return ErrorKind.UNKNOWN


def classify_error(error: BaseException | None) -> ErrorKind:
    """Map a diagnostic to an ErrorKind by type, then by name/message patterns."""
    if error is None:
        return ErrorKind.ABSENT
    if isinstance(error, AggregateError):
        return ErrorKind.AGGREGATE
    for exc_type, kind in _TYPE_KINDS:
        if isinstance(error, exc_type):
            return kind
    return _classify_cached(f"{type(error).__name__} {error}")
