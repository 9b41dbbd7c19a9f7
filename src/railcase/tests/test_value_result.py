"""Tests for ValueResult and exception capture.

Validates:
- Functor and monad laws
- check / zip short-circuit semantics
- attempt converts exceptions while combinators never catch
"""

from __future__ import annotations

from typing import Callable

import pytest

from railcase.failures import ExceptionFailure, Failure
from railcase.results import Fail, Result, Success, ValueResult, attempt, attempt_async

A = Failure(code="a", message="first")
B = Failure(code="b", message="second")


def _explode(*_: object) -> object:
    raise AssertionError("callback must not be invoked")


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor / Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Success(42).map(lambda x: x) == Success(42)
    assert Fail(A).map(lambda x: x) == Fail(A)


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    assert Success(5).map(lambda x: f(g(x))) == Success(5).map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], ValueResult[int]] = lambda x: Success(x * 2)
    assert Success(42).bind(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    assert Success(42).bind(Success) == Success(42)


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    f: Callable[[int], ValueResult[int]] = lambda x: Success(x + 1)
    g: Callable[[int], ValueResult[int]] = lambda x: Success(x * 2) if x < 10 else Fail(A)
    m = Success(5)
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_success_accessors() -> None:
    result = Success(42)

    assert result.is_success() and not result.is_failure()
    assert result.try_get_value() == (True, 42)
    assert result.try_get_failure() == (False, None)
    assert result.unwrap() == 42
    assert result.unwrap_or(0) == 42


def test_failure_accessors() -> None:
    result: ValueResult[int] = Fail(A)

    assert result.is_failure() and not result.is_success()
    assert result.try_get_value() == (False, None)
    assert result.try_get_failure() == (True, A)
    assert result.get_failure_or_throw() is A
    assert result.unwrap_or(0) == 0


def test_unwrap_on_failure_raises() -> None:
    with pytest.raises(RuntimeError, match="a"):
        Fail(A).unwrap()


def test_get_failure_or_throw_on_success_raises() -> None:
    with pytest.raises(RuntimeError):
        Success(1).get_failure_or_throw()


def test_none_is_a_valid_success_value() -> None:
    result = Success(None)
    assert result.is_success()
    assert result.try_get_value() == (True, None)


def test_fail_requires_failure_instance() -> None:
    with pytest.raises(TypeError):
        Fail("a")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ValueResult.failure(ValueError("a"))  # type: ignore[arg-type]


def test_bind_never_calls_f_on_failure() -> None:
    """bind and map never call f on a failure."""
    assert Fail(A).bind(_explode) == Fail(A)  # type: ignore[arg-type]
    assert Fail(A).map(_explode) == Fail(A)


def test_check() -> None:
    assert Success(4).check(lambda x: x > 0, lambda: B) == Success(4)
    assert Success(-4).check(lambda x: x > 0, lambda: B) == Fail(B)


def test_check_keeps_existing_failure_without_evaluating() -> None:
    """An existing failure is never evaluated against the predicate."""
    original: ValueResult[int] = Fail(A)
    assert original.check(_explode, _explode) is original  # type: ignore[arg-type]


def test_match() -> None:
    assert Success(2).match(success=lambda x: x * 3, failure=_explode) == 6
    assert Fail(A).match(success=_explode, failure=lambda f: f.code) == "a"


def test_tap_and_tap_failure() -> None:
    seen: list[object] = []
    ok, bad = Success(1), Fail(A)

    assert ok.tap(seen.append) is ok
    assert ok.tap_failure(_explode) is ok
    assert bad.tap(_explode) is bad
    assert bad.tap_failure(seen.append) is bad
    assert seen == [1, A]


def test_zip_pairs_values() -> None:
    assert Success(5).zip(lambda x: Success(x * 2)) == Success((5, 10))


def test_zip_with_projector() -> None:
    assert Success(5).zip(lambda x: Success(str(x)), lambda a, b: f"{a}:{b}") == Success("5:5")


def test_zip_first_failure_wins() -> None:
    """The second function is not invoked when the first result failed."""
    assert Fail(A).zip(_explode) == Fail(A)  # type: ignore[arg-type]


def test_zip_propagates_second_failure() -> None:
    assert Success(1).zip(lambda _: Fail(B)) == Fail(B)


def test_to_result() -> None:
    assert Success(1).to_result() == Result.success()
    assert Fail(A).to_result() == Result.failure(A)


def test_iter_and_bool() -> None:
    assert list(Success(3)) == [3]
    assert list(Fail(A)) == []
    assert Success(0)
    assert not Fail(A)


def test_display() -> None:
    assert repr(Success(1)) == "Success(1)"
    assert repr(Fail(A)) == "Failure(Failure)"
    assert repr(Fail(ExceptionFailure(KeyError("k")))) == "Failure(ExceptionFailure)"
    assert str(Success(1)) == "1"
    assert str(Fail(A)) == ""


def test_equality_and_hash() -> None:
    assert Success(1) == Success(1)
    assert Success(1) != Success(2)
    assert Success(1) != Fail(A)
    assert Fail(A) == Fail(Failure(code="a", message="first"))
    assert hash(Success("x")) == hash(Success("x"))


def test_combinators_do_not_catch() -> None:
    """Callback exceptions propagate unmodified."""
    def fail(_: int) -> int:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        Success(1).map(fail)


# ═════════════════════════════════════════════════════════════════════════════
# Exception Capture
# ═════════════════════════════════════════════════════════════════════════════


def test_attempt_success() -> None:
    assert attempt(int, "12") == Success(12)
    assert attempt(dict, a=1) == Success({"a": 1})


def test_attempt_captures_exception() -> None:
    """attempt converts a raised exception into an ExceptionFailure."""
    failure = attempt(int, "x").get_failure_or_throw()

    assert isinstance(failure, ExceptionFailure)
    assert failure.code == "exception:ValueError"
    assert isinstance(failure.exception, ValueError)


@pytest.mark.asyncio
async def test_attempt_async() -> None:
    async def load(x: int) -> int:
        if x < 0:
            raise LookupError("negative")
        return x

    assert await attempt_async(load, 3) == Success(3)
    assert await attempt_async(lambda: 4) == Success(4)
    failure = (await attempt_async(load, -1)).get_failure_or_throw()
    assert failure.code == "exception:LookupError"
    assert failure.message == "negative"


# ═════════════════════════════════════════════════════════════════════════════
# Async Combinators
# ═════════════════════════════════════════════════════════════════════════════


async def _inc(x: int) -> int:
    return x + 1


@pytest.mark.asyncio
async def test_map_and_bind_async() -> None:
    async def half(x: int) -> ValueResult[int]:
        return Success(x // 2) if x % 2 == 0 else Fail(A)

    assert await Success(1).map_async(_inc) == Success(2)
    assert await Success(1).map_async(lambda x: x * 5) == Success(5)
    assert await Success(8).bind_async(half) == Success(4)
    assert await Success(7).bind_async(half) == Fail(A)
    assert await Fail(B).bind_async(_explode) == Fail(B)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_check_async() -> None:
    async def positive(x: int) -> bool:
        return x > 0

    assert await Success(1).check_async(positive, lambda: B) == Success(1)
    assert await Success(-1).check_async(positive, lambda: B) == Fail(B)
    assert await Fail(A).check_async(_explode, _explode) == Fail(A)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_zip_async() -> None:
    async def lookup(x: int) -> ValueResult[str]:
        return Success(f"#{x}")

    assert await Success(7).zip_async(lookup) == Success((7, "#7"))
    assert await Success(7).zip_async(lookup, lambda a, b: b * 2) == Success("#7#7")
    assert await Fail(A).zip_async(_explode) == Fail(A)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_match_async_and_taps() -> None:
    seen: list[object] = []

    async def record(item: object) -> None:
        seen.append(item)

    assert await Success(2).match_async(success=_inc, failure=_explode) == 3
    assert await Fail(A).match_async(success=_explode, failure=lambda f: f.code) == "a"
    await Success(5).tap_async(record)
    await Fail(A).tap_failure_async(record)
    await Fail(A).tap_async(_explode)
    assert seen == [5, A]


@pytest.mark.asyncio
async def test_async_callback_exception_propagates() -> None:
    async def fail(_: int) -> int:
        raise KeyError("boom")

    with pytest.raises(KeyError):
        await Success(1).map_async(fail)
