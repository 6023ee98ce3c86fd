"""Aggregation over many Results.

Unlike a fail-fast sequence, ``combine`` keeps every failure: the aggregate
diagnostic lists each failed member's error in input order, with None kept
where a member failed without one.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Callable, Generic, NamedTuple, TypeVar

from ..errors import AggregateError
from .result import UNDEFINED, Result

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

T = TypeVar("T")
U = TypeVar("U")


class Partitioned(NamedTuple, Generic[T]):
    """Successful values and failure diagnostics, as two independent lists."""

    successes: list[T]
    errors: list[Exception | None]


def combine(results: Iterable[Result[T]]) -> Result[list[T]]:
    """[Result[T]] → Result[[T]], accumulating every failure.

    Example:
        >>> combine([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> e1, e2 = KeyError("a"), KeyError("b")
        >>> combine([Ok(1), Fail(e1), Ok(3), Fail(e2)]).error == AggregateError([e1, e2])
        True
    """
    drained = list(results)
    errors = [r.error for r in drained if not r.success]
    if errors:
        return Result(False, UNDEFINED, AggregateError(errors))
    return Result(True, [r.value for r in drained], None)


def partition(results: Iterable[Result[T]]) -> Partitioned[T]:
    """Split into successful values and failure diagnostics. Never fails."""
    successes: list[T] = []
    errors: list[Exception | None] = []
    for r in results:
        if r.success:
            successes.append(r.value)
        else:
            errors.append(r.error)
    return Partitioned(successes, errors)


async def traverse_async(items: Iterable[T], f: Callable[[T], Awaitable[Result[U]]]) -> Result[list[U]]:
    """Run f over every item concurrently, then combine.

    Every call is started before any is awaited; there is no concurrency
    limit, and a failing element neither cancels nor affects its siblings.
    If a call raises, the first raised exception propagates, but only after
    every call has finished.
    """
    pending = [f(item) for item in items]
    completed = await asyncio.gather(*pending, return_exceptions=True)
    for outcome in completed:
        if isinstance(outcome, BaseException):
            raise outcome
    return combine(completed)
