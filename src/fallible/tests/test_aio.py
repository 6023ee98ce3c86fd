"""Tests for the asyncio bridge: boundary adapters, async combinators, then, resolved."""

from __future__ import annotations

import asyncio

import pytest

from fallible import Fail, Ok, Result, VoidResult, as_result, as_void_result, resolved, then, try_async


async def _value(v: object, delay: float = 0) -> object:
    await asyncio.sleep(delay)
    return v


async def _raise(error: Exception) -> object:
    await asyncio.sleep(0)
    raise error


# ─────────────────────────────────────────────────────────────────────────────
# Boundary Adapters
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_as_result_ok() -> None:
    assert await as_result(_value(5)) == Ok(5)


@pytest.mark.asyncio
async def test_as_result_absorbs_exception() -> None:
    error = ConnectionError("reset")
    result = await as_result(_raise(error))

    assert not result.success
    assert result.error is error


@pytest.mark.asyncio
async def test_as_result_accepts_tasks_and_futures() -> None:
    task = asyncio.ensure_future(_value("task"))
    assert await as_result(task) == Ok("task")


@pytest.mark.asyncio
async def test_as_result_does_not_absorb_cancellation() -> None:
    task = asyncio.ensure_future(asyncio.sleep(10))
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await as_result(task)


@pytest.mark.asyncio
async def test_as_void_result() -> None:
    error = OSError("io")
    assert await as_void_result(_value(1)) == VoidResult.ok()
    assert (await as_void_result(_raise(error))).error is error


@pytest.mark.asyncio
async def test_try_async_ok() -> None:
    assert await try_async(lambda: _value("v")) == Ok("v")


@pytest.mark.asyncio
async def test_try_async_without_mapper_keeps_error() -> None:
    error = ValueError("raw")
    assert await try_async(lambda: _raise(error)) == Fail(error)


@pytest.mark.asyncio
async def test_try_async_maps_error() -> None:
    error = ValueError("raw")

    class DomainError(Exception):
        pass

    result = await try_async(lambda: _raise(error), error_mapper=lambda e: DomainError(f"wrapped {e}"))

    assert isinstance(result.error, DomainError)
    assert str(result.error) == "wrapped raw"


@pytest.mark.asyncio
async def test_try_async_mapper_returning_none_keeps_original() -> None:
    error = ValueError("raw")
    result = await try_async(lambda: _raise(error), error_mapper=lambda e: None)
    assert result.error is error


@pytest.mark.asyncio
async def test_try_async_absorbs_error_raised_before_await() -> None:
    def broken():
        raise KeyError("sync")

    result = await try_async(broken)
    assert isinstance(result.error, KeyError)


# ─────────────────────────────────────────────────────────────────────────────
# Async Combinators
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_map_async() -> None:
    async def double(x: int) -> int:
        return x * 2

    error = ValueError()
    assert await Ok(4).map_async(double) == Ok(8)
    assert await Fail(error).map_async(double) == Fail(error)


@pytest.mark.asyncio
async def test_map_async_failure_never_calls_function() -> None:
    calls: list[int] = []

    async def record(x: int) -> int:
        calls.append(x)
        return x

    await Fail(ValueError(), value=1).map_async(record)
    assert calls == []


@pytest.mark.asyncio
async def test_on_success_async() -> None:
    seen: list[int] = []

    async def record(x: int) -> None:
        seen.append(x)

    ok = Ok(1)
    assert await ok.on_success_async(record) is ok
    failed = Fail(ValueError(), value=2)
    assert await failed.on_success_async(record) is failed
    assert seen == [1]


@pytest.mark.asyncio
async def test_bind_async() -> None:
    error, inner = ValueError("outer"), KeyError("inner")

    async def lookup(key: str) -> Result[int]:
        return Ok(len(key)) if key else Fail(inner)

    assert await Ok("abc").bind_async(lookup) == Ok(3)
    assert await Ok("").bind_async(lookup) == Fail(inner)
    assert await Fail(error).bind_async(lookup) == Fail(error)


@pytest.mark.asyncio
async def test_void_bind_async() -> None:
    error = ValueError()
    calls: list[str] = []

    async def produce() -> Result[str]:
        calls.append("called")
        return Ok("made")

    assert await VoidResult.ok().bind_async(produce) == Ok("made")
    assert await VoidResult.fail(error).bind_async(produce) == Fail(error)
    assert calls == ["called"]


# ─────────────────────────────────────────────────────────────────────────────
# then / resolved
# ─────────────────────────────────────────────────────────────────────────────


async def _increment(x: int) -> Result[int]:
    return Ok(x + 1)


@pytest.mark.asyncio
async def test_then_chains_on_success() -> None:
    assert await then(as_result(_value(1)), _increment) == Ok(2)


@pytest.mark.asyncio
async def test_then_chains_repeatedly() -> None:
    assert await then(then(resolved(Ok(1)), _increment), _increment) == Ok(3)


@pytest.mark.asyncio
async def test_then_returns_failure_unchanged() -> None:
    failed = Fail(ValueError(), value=5)
    assert await then(resolved(failed), _increment) is failed


@pytest.mark.asyncio
async def test_resolved_is_reawaitable() -> None:
    wrapped = resolved(Ok("done"))
    assert await wrapped == Ok("done")
    assert await wrapped == Ok("done")
    assert wrapped.outcome == Ok("done")


@pytest.mark.asyncio
async def test_resolved_void() -> None:
    assert await resolved(VoidResult.ok()) == VoidResult.ok()
