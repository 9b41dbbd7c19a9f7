"""Assertion helpers for tests that work with railcase containers.

Each helper inspects a container through its non-throwing accessors and either
returns the payload (so assertions can be chained) or raises
``FunctionalAssertError``, an ``AssertionError`` subclass that pytest reports
like any failed assert.

Example:
    >>> value = assert_success(parse("42"))
    >>> failure = assert_failure_with_code(parse("x"), "parse")
    >>> assert_right_with_value(Right(3).map(lambda x: x + 1), 4)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from railcase.eithers import Either
from railcase.failures import Failure
from railcase.options import Option
from railcase.results import Result, ValueResult

T = TypeVar("T")
L = TypeVar("L")
R = TypeVar("R")
F = TypeVar("F", bound=Failure)


class FunctionalAssertError(AssertionError):
    """Raised when a container is not in the expected state."""


# ─── Option ──────────────────────────────────────────────────────────────


def assert_some(option: Option[T]) -> T:
    """Assert a value is present and return it."""
    found, value = option.try_get_value()
    if not found:
        raise FunctionalAssertError("Expected a value, but got Nothing.")
    return value  # type: ignore[return-value]


def assert_some_with_value(option: Option[T], expected: T) -> T:
    actual = assert_some(option)
    if actual != expected:
        raise FunctionalAssertError(f"Expected value '{expected}', but got '{actual}'.")
    return actual


def assert_none(option: Option[Any]) -> None:
    found, value = option.try_get_value()
    if found:
        raise FunctionalAssertError(f"Expected Nothing, but got value '{value}'.")


# ─── Result ──────────────────────────────────────────────────────────────


@overload
def assert_success(result: ValueResult[T]) -> T: ...


@overload
def assert_success(result: Result) -> None: ...


def assert_success(result: Result | ValueResult[Any]) -> Any:
    """Assert success. Returns the value for a ValueResult, None for a plain Result."""
    failed, failure = result.try_get_failure()
    if failed:
        raise FunctionalAssertError(f"Expected success, but got failure: {failure!r}")
    if isinstance(result, ValueResult):
        return result.try_get_value()[1]
    return None


def assert_success_with_value(result: ValueResult[T], expected: T) -> T:
    """Assert success with a value equal to expected. Sequences compare element-wise."""
    actual = assert_success(result)
    if _comparable(actual) != _comparable(expected):
        raise FunctionalAssertError(f"Expected success result with value '{expected}', but got '{actual}'.")
    return actual


def assert_success_that_satisfies(result: ValueResult[T], predicate: Callable[[T], bool], description: str) -> T:
    actual = assert_success(result)
    if not predicate(actual):
        raise FunctionalAssertError(f"Expected result that satisfies {description}, but got '{actual}'")
    return actual


def assert_failure(result: Result | ValueResult[Any]) -> Failure:
    """Assert failure and return it."""
    failed, failure = result.try_get_failure()
    if not failed or failure is None:
        raise FunctionalAssertError("Expected failure, but got success.")
    return failure


def assert_failure_with_code(result: Result | ValueResult[Any], code: str) -> Failure:
    actual = assert_failure(result)
    if actual.code != code:
        raise FunctionalAssertError(f"Expected failure with '{code}', but was '{actual.code}'")
    return actual


def assert_failure_with_message(result: Result | ValueResult[Any], message: str) -> Failure:
    actual = assert_failure(result)
    if actual.message != message:
        raise FunctionalAssertError(f"Expected failure with '{message}', but was '{actual.message}'")
    return actual


def assert_failure_that_satisfies(
    result: Result | ValueResult[Any],
    predicate: Callable[[Failure], bool],
    description: str,
) -> Failure:
    actual = assert_failure(result)
    if not predicate(actual):
        raise FunctionalAssertError(f"Expected failure that satisfies '{description}', but got {actual!r}.")
    return actual


def assert_failure_of_type(result: Result | ValueResult[Any], failure_type: type[F]) -> F:
    """Assert failure whose type is failure_type (or a subclass) and return it."""
    actual = assert_failure(result)
    if not isinstance(actual, failure_type):
        raise FunctionalAssertError(
            f"Expected failure of type {failure_type.__name__}, but was {type(actual).__name__}"
        )
    return actual


def _comparable(value: Any) -> Any:
    return list(value) if isinstance(value, (list, tuple)) else value


# ─── Either ──────────────────────────────────────────────────────────────


def assert_left(either: Either[L, Any]) -> L:
    is_left, value = either.try_get_left()
    if not is_left:
        raise FunctionalAssertError(f"Expected left value, but got right value '{either.try_get_right()[1]}'.")
    return value  # type: ignore[return-value]


def assert_left_with_value(either: Either[L, Any], expected: L) -> L:
    actual = assert_left(either)
    if actual != expected:
        raise FunctionalAssertError(f"Expected '{expected}', but got '{actual}'.")
    return actual


def assert_right(either: Either[Any, R]) -> R:
    is_right, value = either.try_get_right()
    if not is_right:
        raise FunctionalAssertError(f"Expected right value, but got left value '{either.try_get_left()[1]}'.")
    return value  # type: ignore[return-value]


def assert_right_with_value(either: Either[Any, R], expected: R) -> R:
    actual = assert_right(either)
    if actual != expected:
        raise FunctionalAssertError(f"Expected '{expected}', but got '{actual}'.")
    return actual
