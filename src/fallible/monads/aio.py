"""Bridge between asyncio awaitables and outcomes.

Boundary adapters (``as_result``, ``as_void_result``, ``try_async``) absorb
exceptions raised while awaiting; ``then`` sequences two asynchronous steps;
``resolved`` presents an already-computed outcome as an awaitable.

Example:
    >>> async def fetch(key: str) -> int:
    ...     return len(key)
    >>>
    >>> async def main() -> Result[int]:
    ...     return await then(try_async(lambda: fetch("abc")), lambda n: resolved(Ok(n * 2)))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generator, Generic, TypeVar

from ..observability import log_absorbed
from .result import UNDEFINED, Outcome, Result, VoidResult

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")
O = TypeVar("O", bound=Outcome)  # noqa: E741


async def as_result(awaitable: Awaitable[T]) -> Result[T]:
    """Await, turning the value into Ok and any raised exception into Fail."""
    try:
        return Result(True, await awaitable, None)
    except Exception as e:
        log_absorbed("as_result", e)
        return Result(False, UNDEFINED, e)


async def as_void_result(awaitable: Awaitable[Any]) -> VoidResult:
    """Await for completion only; any raised exception becomes the failure."""
    try:
        await awaitable
    except Exception as e:
        log_absorbed("as_void_result", e)
        return VoidResult(False, e)
    return VoidResult(True, None)


async def try_async(
    fn: Callable[[], Awaitable[T]],
    error_mapper: Callable[[Exception], Exception | None] | None = None,
) -> Result[T]:
    """Call and await fn, absorbing exceptions.

    ``error_mapper`` translates the caught exception before it is wrapped; a
    mapper returning None keeps the original exception.
    """
    try:
        return Result(True, await fn(), None)
    except Exception as e:
        log_absorbed("try_async", e)
        mapped = error_mapper(e) if error_mapper is not None else None
        return Result(False, UNDEFINED, mapped if mapped is not None else e)


async def then(pending: Awaitable[Result[T]], fn: Callable[[T], Awaitable[Result[T]]]) -> Result[T]:
    """Await ``pending``; on success await ``fn(value)``, else return the failure."""
    result = await pending
    return await fn(result.value) if result.success else result


class Resolved(Generic[O]):
    """Awaitable wrapping an already-computed outcome.

    Awaiting never suspends and may be repeated; nothing is scheduled.
    """

    __slots__ = ("outcome",)

    def __init__(self, outcome: O) -> None:
        self.outcome = outcome

    def __await__(self) -> Generator[Any, None, O]:
        return self.outcome
        yield  # pragma: no cover

    def __repr__(self) -> str:
        return f"Resolved({self.outcome!r})"


def resolved(outcome: O) -> Resolved[O]:
    """Wrap a completed outcome for call sites expecting an awaitable."""
    return Resolved(outcome)
