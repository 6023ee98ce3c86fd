"""Validation combinators for successful Results.

Each check applies only to an already-successful Result and synthesises its
diagnostic through a caller-supplied factory; nothing here raises. Failures
pass through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..errors import AggregateError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .result import Result

T = TypeVar("T")


def validate(
    result: Result[T],
    validator: Callable[[T], Iterable[str]],
    error_factory: Callable[[str], Exception],
) -> Result[T]:
    """Fail with every violation reported by ``validator``, aggregated.

    Example:
        >>> def check(name: str) -> list[str]:
        ...     return [] if name else ["name is empty"]
        >>> Ok("").validate(check, ValueError).error
        AggregateError([ValueError('name is empty')])
    """
    if not result.success:
        return result
    messages = list(validator(result.value))
    if not messages:
        return result
    return type(result).fail(AggregateError(error_factory(m) for m in messages))


def when(
    result: Result[T],
    predicate: Callable[[T], bool],
    error_factory: Callable[[T], Exception],
) -> Result[T]:
    """Fail with ``error_factory(value)`` unless ``predicate(value)`` holds."""
    if not result.success or predicate(result.value):
        return result
    return type(result).fail(error_factory(result.value))


def not_none(result: Result[T], error_factory: Callable[[], Exception]) -> Result[T]:
    """Fail with ``error_factory()`` if a successful Result holds None."""
    if result.success and not result.has_value:
        return type(result).fail(error_factory())
    return result
