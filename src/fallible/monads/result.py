"""Outcome types for fallible operations.

Two shapes share one base:
- Result[T]: success carrying a value, or failure carrying an optional diagnostic
- VoidResult: success or failure with no value at all

Both are immutable. Diagnostics are ordinary exceptions, absorbed only at the
boundary constructors (``get``) and re-raised only by ``throw()``/``unwrap()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ..errors import AggregateError, ErrorReport, UnwrapError
from ..observability import log_absorbed, log_handler_failure
from . import validation as _validation

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable, Iterator
    from typing import Self

T = TypeVar("T")  # Held value type
U = TypeVar("U")  # Mapped value type


class _Undefined:
    """Marker for 'no value held', distinct from a held ``None``."""

    __slots__ = ()
    __repr__ = lambda self: "UNDEFINED"  # noqa: E731
    __bool__ = lambda self: False  # noqa: E731


UNDEFINED: Any = _Undefined()


class Outcome(ABC):
    """Base of Result and VoidResult: success flag plus optional diagnostic.

    A failure does not guarantee a diagnostic; test ``success``, never
    ``error is None``, to tell the two apart.
    """

    __slots__ = ("_success", "_error")

    def __init__(self, success: bool, error: Exception | None) -> None:
        self._success = success
        self._error = error

    # ─── Inspection ────────────────────────────────────────────────────

    @property
    def success(self) -> bool:
        return self._success

    @property
    def failed(self) -> bool:
        return not self._success

    @property
    def error(self) -> Exception | None:
        return self._error

    def report(self) -> ErrorReport | None:
        """Structured description of the diagnostic; None on success."""
        return None if self._success else ErrorReport.from_error(self._error)

    # ─── Failure Handling ──────────────────────────────────────────────

    @abstractmethod
    def _with_error(self, error: Exception) -> Self:
        """Failure of the same shape carrying ``error``."""

    def when_failed(self, handler: Callable[[Exception], object]) -> Self:
        """Run handler on the diagnostic, if there is one.

        Gated on the diagnostic, not the success flag: a failure without a
        diagnostic skips the handler. If the handler raises, the result is a
        failure whose diagnostic aggregates the original and the handler's
        error, in that order. A None handler is a no-op.
        """
        if self._error is None or handler is None:
            return self
        try:
            handler(self._error)
        except Exception as e:
            log_handler_failure(self._error, e)
            return self._with_error(AggregateError([self._error, e]))
        return self

    def with_default_error(self, error: Exception) -> Self:
        """Attach ``error`` to a failure that has none; otherwise return self."""
        if not self._success and self._error is None:
            return type(self).fail(error)  # type: ignore[attr-defined]
        return self

    def throw(self) -> None:
        """Raise the diagnostic if present. No-op otherwise."""
        if self._error is not None:
            raise self._error

    __bool__ = lambda self: self._success  # noqa: E731


class VoidResult(Outcome):
    """Outcome of an operation that produces no value.

    Example:
        >>> VoidResult.get(lambda: None)
        Ok()
        >>> VoidResult.fail().with_default_error(KeyError("k")).error
        KeyError('k')
    """

    __slots__ = ()

    # ─── Construction ──────────────────────────────────────────────────

    @classmethod
    def ok(cls) -> VoidResult:
        return cls(True, None)

    @classmethod
    def fail(cls, error: Exception | None = None) -> VoidResult:
        return cls(False, error)

    @classmethod
    def get(cls, action: Callable[[], object]) -> VoidResult:
        """Run action, converting any raised exception into a failure."""
        if action is None:
            raise TypeError("action must not be None")
        try:
            action()
        except Exception as e:
            log_absorbed("get", e)
            return cls(False, e)
        return cls(True, None)

    def _with_error(self, error: Exception) -> VoidResult:
        return VoidResult(False, error)

    # ─── Combinators ───────────────────────────────────────────────────

    def match(self, *, ok: Callable[[], U], err: Callable[[Exception | None], U]) -> U:
        """Dispatch one branch. ``err`` may receive None."""
        return ok() if self._success else err(self._error)

    def on_success(self, action: Callable[[], object]) -> VoidResult:
        if self._success:
            action()
        return self

    def map(self, f: Callable[[], U]) -> Result[U]:
        """Produce a value on success; propagate the diagnostic otherwise."""
        return Result(True, f(), None) if self._success else Result(False, UNDEFINED, self._error)

    def bind(self, f: Callable[[], Result[U]]) -> Result[U]:
        return f() if self._success else Result(False, UNDEFINED, self._error)

    async def bind_async(self, f: Callable[[], Awaitable[Result[U]]]) -> Result[U]:
        """Await f() on success; short-circuit with the diagnostic otherwise."""
        if self._success:
            return await f()
        return Result(False, UNDEFINED, self._error)

    # ─── Dunder Methods ────────────────────────────────────────────────

    __hash__ = lambda self: hash((self._success, self._error))  # noqa: E731

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VoidResult):
            return NotImplemented
        return self._success == other._success and self._error == other._error

    def __repr__(self) -> str:
        return "Ok()" if self._success else f"Fail({self._error!r})"


class Result(Outcome, Generic[T]):
    """Outcome carrying a value on success.

    A failure may retain a last-known value for information only; consumers
    must not treat it as valid unless ``success`` is true. Hashing hashes the
    held value, so it raises TypeError for unhashable values such as lists.

    Examples:
        >>> Ok(5).map(lambda x: x * 2)
        Ok(10)
        >>> Result.get(lambda: int("x")).success
        False
        >>> Ok(4).when(lambda n: n % 2 == 0, lambda n: ValueError(f"{n} is odd"))
        Ok(4)
    """

    __slots__ = ("_value",)

    def __init__(self, success: bool, value: T, error: Exception | None) -> None:
        super().__init__(success, error)
        self._value = value

    # ─── Construction ──────────────────────────────────────────────────

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(True, value, None)

    @classmethod
    def fail(cls, error: Exception | None = None, *, value: T = UNDEFINED) -> Result[T]:
        """Failure, optionally retaining a last-known value."""
        return cls(False, value, error)

    @classmethod
    def get(cls, fn: Callable[[], T]) -> Result[T]:
        """Call fn, converting any raised exception into a failure."""
        if fn is None:
            raise TypeError("fn must not be None")
        try:
            return cls(True, fn(), None)
        except Exception as e:
            log_absorbed("get", e)
            return cls(False, UNDEFINED, e)

    def _with_error(self, error: Exception) -> Result[T]:
        return Result(False, self._value, error)

    # ─── Value Extraction ──────────────────────────────────────────────

    @property
    def value(self) -> T:
        """Held value, unchecked. Only meaningful when ``success`` is true."""
        return None if self._value is UNDEFINED else self._value  # type: ignore[return-value]

    @property
    def has_value(self) -> bool:
        """True if a non-None value is held, whatever the success flag."""
        return self._value is not UNDEFINED and self._value is not None

    def unwrap(self) -> T:
        """Return the value on success; raise the diagnostic otherwise."""
        if self._success:
            return self._value
        if self._error is not None:
            raise self._error
        raise UnwrapError("unwrap() on a failed Result without an error")

    def with_default_value(self, default: T) -> T:
        """Held value if defined, else ``default``, regardless of success."""
        return self._value if self.has_value else default

    # ─── Combinators ───────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[Exception | None], U]) -> U:
        """Dispatch one branch. ``err`` may receive None."""
        return ok(self._value) if self._success else err(self._error)

    def on_success(self, action: Callable[[T], object]) -> Result[T]:
        if self._success:
            action(self._value)
        return self

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Apply f to the value on success; propagate the diagnostic otherwise."""
        return Result(True, f(self._value), None) if self._success else Result(False, UNDEFINED, self._error)

    def bind(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Monadic bind. On success the returned outcome is f's, as is."""
        return f(self._value) if self._success else Result(False, UNDEFINED, self._error)

    # ─── Validation ────────────────────────────────────────────────────

    def validate(
        self,
        validator: Callable[[T], Iterable[str]],
        error_factory: Callable[[str], Exception],
    ) -> Result[T]:
        return _validation.validate(self, validator, error_factory)

    def when(self, predicate: Callable[[T], bool], error_factory: Callable[[T], Exception]) -> Result[T]:
        return _validation.when(self, predicate, error_factory)

    def not_none(self, error_factory: Callable[[], Exception]) -> Result[T]:
        return _validation.not_none(self, error_factory)

    # ─── Async Combinators ─────────────────────────────────────────────

    async def map_async(self, f: Callable[[T], Awaitable[U]]) -> Result[U]:
        if self._success:
            return Result(True, await f(self._value), None)
        return Result(False, UNDEFINED, self._error)

    async def on_success_async(self, f: Callable[[T], Awaitable[object]]) -> Result[T]:
        if self._success:
            await f(self._value)
        return self

    async def bind_async(self, f: Callable[[T], Awaitable[Result[U]]]) -> Result[U]:
        """Await f(value) on success; short-circuit with the diagnostic otherwise."""
        if self._success:
            return await f(self._value)
        return Result(False, UNDEFINED, self._error)

    # ─── Dunder Methods ────────────────────────────────────────────────

    __hash__ = lambda self: hash((self._success, self._value, self._error))  # noqa: E731

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (
            self._success == other._success
            and self._value == other._value
            and self._error == other._error
        )

    def __repr__(self) -> str:
        if self._success:
            return f"Ok({self._value!r})"
        if self._value is UNDEFINED:
            return f"Fail({self._error!r})"
        return f"Fail({self._error!r}, value={self._value!r})"

    def __iter__(self) -> Iterator[T]:
        """Yields the value if success, nothing otherwise."""
        if self._success:
            yield self._value


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T]:  # noqa: N802
    """Successful Result holding ``value``."""
    return Result(True, value, None)


def Fail(error: Exception | None = None, *, value: T = UNDEFINED) -> Result[T]:  # noqa: N802
    """Failed Result, with an optional diagnostic and optional retained value."""
    return Result(False, value, error)
