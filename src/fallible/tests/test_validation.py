"""Tests for validate, when and not_none."""

from __future__ import annotations

import pytest

from fallible import AggregateError, Fail, Ok, Result
from fallible.monads import not_none, validate, when


class ValidationError(Exception):
    pass


def _rules(user: dict[str, object]) -> list[str]:
    problems = []
    if not user.get("name"):
        problems.append("name is required")
    if not isinstance(user.get("age"), int):
        problems.append("age must be an integer")
    return problems


def test_validate_passes_through_when_no_violations() -> None:
    result = Ok({"name": "ada", "age": 36})
    assert result.validate(_rules, ValidationError) is result


def test_validate_aggregates_every_violation_in_order() -> None:
    result = Ok({"name": "", "age": "old"}).validate(_rules, ValidationError)

    assert not result.success
    assert isinstance(result.error, AggregateError)
    assert [str(e) for e in result.error.errors] == ["name is required", "age must be an integer"]
    assert all(isinstance(e, ValidationError) for e in result.error.errors)


def test_validate_single_violation_still_aggregate() -> None:
    result = Ok({"name": "ada", "age": None}).validate(_rules, ValidationError)
    assert isinstance(result.error, AggregateError)
    assert len(result.error) == 1


def test_validate_skips_failures() -> None:
    error = RuntimeError("upstream")
    calls: list[object] = []

    def validator(value: object) -> list[str]:
        calls.append(value)
        return ["never"]

    assert Fail(error).validate(validator, ValidationError) == Fail(error)
    assert calls == []


def test_validate_accepts_generator_validators() -> None:
    def rules(n: int):
        if n < 0:
            yield "negative"
        if n % 2:
            yield "odd"

    result = Ok(-3).validate(rules, ValueError)
    assert [str(e) for e in result.error.errors] == ["negative", "odd"]


def test_when_predicate_holds() -> None:
    result = Ok(4)
    assert result.when(lambda n: n % 2 == 0, lambda n: ValueError(f"{n} is odd")) is result


def test_when_predicate_fails_uses_value_in_factory() -> None:
    result = Ok(3).when(lambda n: n % 2 == 0, lambda n: ValueError(f"{n} is odd"))

    assert not result.success
    assert str(result.error) == "3 is odd"


def test_when_skips_failures() -> None:
    error = RuntimeError()
    called: list[int] = []
    Fail(error).when(lambda n: called.append(n) or True, ValueError)
    assert called == []


def test_not_none() -> None:
    missing = ValueError("missing")

    assert Ok("x").not_none(lambda: missing) == Ok("x")
    assert Ok(None).not_none(lambda: missing) == Fail(missing)


def test_not_none_leaves_failures_alone() -> None:
    original = KeyError("k")
    assert Fail(original).not_none(lambda: ValueError()) == Fail(original)


def test_not_none_keeps_falsy_values() -> None:
    assert Ok(0).not_none(lambda: ValueError()) == Ok(0)
    assert Ok("").not_none(lambda: ValueError()) == Ok("")


@pytest.mark.parametrize(
    ("result", "expected_success"),
    [(Ok(10), True), (Ok(-1), False), (Ok(None), False)],
)
def test_module_functions_match_methods(result: Result[int | None], expected_success: bool) -> None:
    checked = not_none(result, lambda: ValueError("none"))
    checked = when(checked, lambda n: n > 0, lambda n: ValueError(f"{n}"))
    checked = validate(checked, lambda n: [] if n < 100 else ["too big"], ValueError)
    assert checked.success is expected_success
