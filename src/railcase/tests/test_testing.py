"""Tests for the assertion helpers in railcase.testing."""

from __future__ import annotations

import pytest

from railcase.eithers import Left, Right
from railcase.failures import AggregateFailure, Failure
from railcase.options import Nothing, Some
from railcase.results import Fail, Result, Success
from railcase.testing import (
    FunctionalAssertError,
    assert_failure,
    assert_failure_of_type,
    assert_failure_that_satisfies,
    assert_failure_with_code,
    assert_failure_with_message,
    assert_left,
    assert_left_with_value,
    assert_none,
    assert_right,
    assert_right_with_value,
    assert_some,
    assert_some_with_value,
    assert_success,
    assert_success_that_satisfies,
    assert_success_with_value,
)

BOOM = Failure(code="boom", message="it broke")


def test_error_is_assertion_error() -> None:
    assert issubclass(FunctionalAssertError, AssertionError)


# ─── Option ──────────────────────────────────────────────────────────────


def test_option_assertions_pass() -> None:
    assert assert_some(Some(3)) == 3
    assert assert_some_with_value(Some("a"), "a") == "a"
    assert_none(Nothing())


def test_option_assertions_fail() -> None:
    with pytest.raises(FunctionalAssertError, match="Nothing"):
        assert_some(Nothing())
    with pytest.raises(FunctionalAssertError):
        assert_some_with_value(Some(1), 2)
    with pytest.raises(FunctionalAssertError, match="'1'"):
        assert_none(Some(1))


# ─── Result ──────────────────────────────────────────────────────────────


def test_success_assertions_pass() -> None:
    assert assert_success(Success(5)) == 5
    assert assert_success(Result.success()) is None
    assert assert_success_with_value(Success(5), 5) == 5
    assert assert_success_with_value(Success((1, 2)), [1, 2]) == (1, 2)
    assert assert_success_that_satisfies(Success(4), lambda x: x % 2 == 0, "even") == 4


def test_success_assertions_fail() -> None:
    with pytest.raises(FunctionalAssertError, match="Expected success"):
        assert_success(Fail(BOOM))
    with pytest.raises(FunctionalAssertError, match="Expected success"):
        assert_success(Result.failure(BOOM))
    with pytest.raises(FunctionalAssertError, match="'6'"):
        assert_success_with_value(Success(6), 5)
    with pytest.raises(FunctionalAssertError, match="even"):
        assert_success_that_satisfies(Success(3), lambda x: x % 2 == 0, "even")


def test_failure_assertions_pass() -> None:
    assert assert_failure(Fail(BOOM)) is BOOM
    assert assert_failure(Result.failure(BOOM)) is BOOM
    assert assert_failure_with_code(Fail(BOOM), "boom") is BOOM
    assert assert_failure_with_message(Fail(BOOM), "it broke") is BOOM
    assert assert_failure_that_satisfies(Fail(BOOM), lambda f: f.code.startswith("b"), "starts with b") is BOOM


def test_failure_assertions_fail() -> None:
    with pytest.raises(FunctionalAssertError, match="got success"):
        assert_failure(Success(1))
    with pytest.raises(FunctionalAssertError, match="'other'"):
        assert_failure_with_code(Fail(BOOM), "other")
    with pytest.raises(FunctionalAssertError):
        assert_failure_with_message(Fail(BOOM), "different")
    with pytest.raises(FunctionalAssertError, match="starts with z"):
        assert_failure_that_satisfies(Fail(BOOM), lambda f: f.code.startswith("z"), "starts with z")


def test_failure_of_type() -> None:
    aggregate = AggregateFailure([BOOM])

    assert assert_failure_of_type(Fail(aggregate), AggregateFailure) is aggregate
    assert assert_failure_of_type(Fail(aggregate), Failure) is aggregate
    with pytest.raises(FunctionalAssertError, match="AggregateFailure, but was Failure"):
        assert_failure_of_type(Fail(BOOM), AggregateFailure)


# ─── Either ──────────────────────────────────────────────────────────────


def test_either_assertions_pass() -> None:
    assert assert_left(Left("e")) == "e"
    assert assert_left_with_value(Left("e"), "e") == "e"
    assert assert_right(Right(1)) == 1
    assert assert_right_with_value(Right(1), 1) == 1


def test_either_assertions_fail() -> None:
    with pytest.raises(FunctionalAssertError, match="Expected left"):
        assert_left(Right(1))
    with pytest.raises(FunctionalAssertError, match="Expected right"):
        assert_right(Left("e"))
    with pytest.raises(FunctionalAssertError):
        assert_left_with_value(Left("e"), "f")
    with pytest.raises(FunctionalAssertError):
        assert_right_with_value(Right(1), 2)
