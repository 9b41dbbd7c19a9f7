"""Result containers for railway-oriented error handling.

Two discriminated unions of success and failure:
- Result: plain outcome, success carries nothing
- ValueResult[T]: success carries a value of type T

The failure side is always a ``Failure`` (or subclass). Failures are data:
combinators carry them through unchanged and never raise them.

Example:
    >>> def parse(s: str) -> ValueResult[int]:
    ...     return Success(int(s)) if s.isdigit() else Fail(Failure(code="parse", message=s))
    >>>
    >>> parse("21").map(lambda n: n * 2).check(lambda n: n < 100, lambda: Failure(code="range"))
    Success(42)
    >>> parse("x").bind(lambda n: Success(n + 1))
    Failure(Failure)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar, cast, overload

from railcase._awaitable import MaybeAwaitable, resolve
from railcase.failures import ExceptionFailure, Failure
from railcase.observability import get_logger

T = TypeVar("T")
U = TypeVar("U")
T2 = TypeVar("T2")

_MISSING: Any = object()

_log = get_logger("railcase.results")


def _require_failure(failure: object) -> Failure:
    if not isinstance(failure, Failure):
        raise TypeError(f"A failing result requires a Failure, got {type(failure).__name__}")
    return failure


class Result:
    """Outcome of an operation that succeeds without a value or fails with a Failure.

    Examples:
        >>> Result.success().with_value(5)
        Success(5)
        >>> Result.failure(Failure(code="io")).bind(lambda: Success(1)).is_failure()
        True
    """

    __slots__ = ("_failure",)

    def __init__(self, failure: Failure | None) -> None:
        """Private constructor. Use Result.success() or Result.failure() instead."""
        self._failure = failure

    @classmethod
    def success(cls) -> Result:
        return cls(None)

    @classmethod
    def failure(cls, failure: Failure) -> Result:
        return cls(_require_failure(failure))

    # ─── Inspection ──────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._failure is None

    def is_failure(self) -> bool:
        return self._failure is not None

    def try_get_failure(self) -> tuple[bool, Failure | None]:
        """Non-throwing access: (True, failure) when failing, (False, None) otherwise."""
        return self._failure is not None, self._failure

    def get_failure_or_throw(self) -> Failure:
        """Extract the failure. Raises RuntimeError on success."""
        if self._failure is None:
            raise RuntimeError("Trying to get the failure of a success result. No failure available.")
        return self._failure

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[], ValueResult[U]]) -> ValueResult[U]:
        """Run continuation f on success; carry the failure through otherwise."""
        return ValueResult(_MISSING, self._failure) if self._failure is not None else f()

    async def bind_async(self, f: Callable[[], MaybeAwaitable[ValueResult[U]]]) -> ValueResult[U]:
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return await resolve(f())

    def with_value(self, value: U) -> ValueResult[U]:
        """Attach value on success; failure propagates unchanged."""
        return ValueResult(_MISSING, self._failure) if self._failure is not None else ValueResult(value, None)

    def with_value_from(self, factory: Callable[[], U]) -> ValueResult[U]:
        """Attach factory() on success; factory is never called on failure."""
        return ValueResult(_MISSING, self._failure) if self._failure is not None else ValueResult(factory(), None)

    async def with_value_async(self, factory: Callable[[], MaybeAwaitable[U]]) -> ValueResult[U]:
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return ValueResult(await resolve(factory()), None)

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, success: Callable[[], U], failure: Callable[[Failure], U]) -> U:
        """Exhaustive case analysis; exactly one branch runs."""
        return failure(self._failure) if self._failure is not None else success()

    async def match_async(
        self,
        *,
        success: Callable[[], MaybeAwaitable[U]],
        failure: Callable[[Failure], MaybeAwaitable[U]],
    ) -> U:
        return await resolve(failure(self._failure) if self._failure is not None else success())

    # ─── Side Effects ────────────────────────────────────────────────

    def tap(self, on_success: Callable[[], Any]) -> Result:
        """Call on_success when successful, return self."""
        if self._failure is None:
            on_success()
        return self

    async def tap_async(self, on_success: Callable[[], MaybeAwaitable[Any]]) -> Result:
        if self._failure is None:
            await resolve(on_success())
        return self

    def tap_failure(self, on_failure: Callable[[Failure], Any]) -> Result:
        """Call on_failure with the failure when failing, return self."""
        if self._failure is not None:
            on_failure(self._failure)
        return self

    async def tap_failure_async(self, on_failure: Callable[[Failure], MaybeAwaitable[Any]]) -> Result:
        if self._failure is not None:
            await resolve(on_failure(self._failure))
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._failure is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._failure == other._failure

    def __hash__(self) -> int:
        return hash((Result, self._failure))

    def __repr__(self) -> str:
        return "Success()" if self._failure is None else f"Failure({type(self._failure).__name__})"

    def __str__(self) -> str:
        return "Success" if self._failure is None else f"Failure({type(self._failure).__name__})"


class ValueResult(Generic[T]):
    """Outcome of an operation that succeeds with a T or fails with a Failure.

    Exactly one slot is populated. A None success value is allowed.

    Examples:
        >>> Success(5).zip(lambda x: Success(x * 2))
        Success((5, 10))
        >>> Fail(Failure(code="e")).map(lambda x: x + 1).try_get_failure()[1].code
        'e'
    """

    __slots__ = ("_value", "_failure")
    __match_args__ = ("_value",)

    def __init__(self, value: T, failure: Failure | None) -> None:
        """Private constructor. Use Success() or Fail() instead."""
        self._value = None if failure is not None else value
        self._failure = failure

    @classmethod
    def success(cls, value: T) -> ValueResult[T]:
        return cls(value, None)

    @classmethod
    def failure(cls, failure: Failure) -> ValueResult[T]:
        return cls(_MISSING, _require_failure(failure))

    # ─── Inspection ──────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._failure is None

    def is_failure(self) -> bool:
        return self._failure is not None

    def try_get_value(self) -> tuple[bool, T | None]:
        """Non-throwing access: (True, value) on success, (False, None) otherwise."""
        return self._failure is None, self._value

    def try_get_failure(self) -> tuple[bool, Failure | None]:
        """Non-throwing access: (True, failure) when failing, (False, None) otherwise."""
        return self._failure is not None, self._failure

    def get_failure_or_throw(self) -> Failure:
        """Extract the failure. Raises RuntimeError on success."""
        if self._failure is None:
            raise RuntimeError("Trying to get the failure of a success result. No failure available.")
        return self._failure

    def unwrap(self) -> T:
        """Extract the success value. Raises RuntimeError on failure."""
        if self._failure is None:
            return cast(T, self._value)
        raise RuntimeError(f"Called unwrap() on a failure: {self._failure.code}")

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._failure is None else default

    def to_result(self) -> Result:
        """Drop the value: success stays success, the failure is kept."""
        return Result(self._failure)

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> ValueResult[U]:
        """Apply f to the success value."""
        return ValueResult(f(cast(T, self._value)), None) if self._failure is None else ValueResult(_MISSING, self._failure)

    async def map_async(self, f: Callable[[T], MaybeAwaitable[U]]) -> ValueResult[U]:
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return ValueResult(await resolve(f(cast(T, self._value))), None)

    def bind(self, f: Callable[[T], ValueResult[U]]) -> ValueResult[U]:
        """Monadic bind: chain a result-returning step, short-circuit on failure."""
        return f(cast(T, self._value)) if self._failure is None else ValueResult(_MISSING, self._failure)

    async def bind_async(self, f: Callable[[T], MaybeAwaitable[ValueResult[U]]]) -> ValueResult[U]:
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return await resolve(f(cast(T, self._value)))

    def check(self, predicate: Callable[[T], bool], on_failure: Callable[[], Failure]) -> ValueResult[T]:
        """Turn a success whose value fails predicate into Fail(on_failure()).

        An existing failure is returned as-is; predicate is not evaluated for it.
        """
        if self._failure is not None or predicate(cast(T, self._value)):
            return self
        return ValueResult.failure(on_failure())

    async def check_async(
        self,
        predicate: Callable[[T], MaybeAwaitable[bool]],
        on_failure: Callable[[], Failure],
    ) -> ValueResult[T]:
        if self._failure is not None or await resolve(predicate(cast(T, self._value))):
            return self
        return ValueResult.failure(on_failure())

    @overload
    def zip(self, second: Callable[[T], ValueResult[T2]]) -> ValueResult[tuple[T, T2]]: ...

    @overload
    def zip(self, second: Callable[[T], ValueResult[T2]], projector: Callable[[T, T2], U]) -> ValueResult[U]: ...

    def zip(
        self,
        second: Callable[[T], ValueResult[T2]],
        projector: Callable[[T, T2], Any] | None = None,
    ) -> ValueResult[Any]:
        """Combine with a second result computed from this value.

        The first failure wins: second is not called when self is a failure.
        Without projector the values are paired as a tuple.
        """
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return self._zip_with(second(cast(T, self._value)), projector)

    async def zip_async(
        self,
        second: Callable[[T], MaybeAwaitable[ValueResult[T2]]],
        projector: Callable[[T, T2], Any] | None = None,
    ) -> ValueResult[Any]:
        if self._failure is not None:
            return ValueResult(_MISSING, self._failure)
        return self._zip_with(await resolve(second(cast(T, self._value))), projector)

    def _zip_with(self, other: ValueResult[T2], projector: Callable[[T, T2], Any] | None) -> ValueResult[Any]:
        if other._failure is not None:
            return ValueResult(_MISSING, other._failure)
        first, second = cast(T, self._value), cast(T2, other._value)
        return ValueResult((first, second) if projector is None else projector(first, second), None)

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, success: Callable[[T], U], failure: Callable[[Failure], U]) -> U:
        """Exhaustive case analysis; exactly one branch runs."""
        return failure(self._failure) if self._failure is not None else success(cast(T, self._value))

    async def match_async(
        self,
        *,
        success: Callable[[T], MaybeAwaitable[U]],
        failure: Callable[[Failure], MaybeAwaitable[U]],
    ) -> U:
        if self._failure is not None:
            return await resolve(failure(self._failure))
        return await resolve(success(cast(T, self._value)))

    # ─── Side Effects ────────────────────────────────────────────────

    def tap(self, on_success: Callable[[T], Any]) -> ValueResult[T]:
        """Call on_success with the value when successful, return self."""
        if self._failure is None:
            on_success(cast(T, self._value))
        return self

    async def tap_async(self, on_success: Callable[[T], MaybeAwaitable[Any]]) -> ValueResult[T]:
        if self._failure is None:
            await resolve(on_success(cast(T, self._value)))
        return self

    def tap_failure(self, on_failure: Callable[[Failure], Any]) -> ValueResult[T]:
        """Call on_failure with the failure when failing, return self."""
        if self._failure is not None:
            on_failure(self._failure)
        return self

    async def tap_failure_async(self, on_failure: Callable[[Failure], MaybeAwaitable[Any]]) -> ValueResult[T]:
        if self._failure is not None:
            await resolve(on_failure(self._failure))
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._failure is None

    def __iter__(self) -> Iterator[T]:
        """Yields the value on success, nothing on failure."""
        if self._failure is None:
            yield cast(T, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueResult):
            return NotImplemented
        return self._failure == other._failure and self._value == other._value

    def __hash__(self) -> int:
        return hash((ValueResult, self._value, self._failure))

    def __repr__(self) -> str:
        if self._failure is None:
            return f"Success({self._value!r})"
        return f"Failure({type(self._failure).__name__})"

    def __str__(self) -> str:
        return str(self._value) if self._failure is None else ""


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


@overload
def Success() -> Result: ...  # noqa: N802


@overload
def Success(value: T) -> ValueResult[T]: ...  # noqa: N802


def Success(value: Any = _MISSING) -> Result | ValueResult[Any]:  # noqa: N802
    """Successful plain Result when called bare, ValueResult when given a value."""
    return Result(None) if value is _MISSING else ValueResult(value, None)


def Fail(failure: Failure) -> ValueResult[Any]:  # noqa: N802
    """Failing ValueResult. Use Result.failure() for a failing plain Result."""
    return ValueResult.failure(failure)


# ═════════════════════════════════════════════════════════════════════════════
# Exception Capture
# ═════════════════════════════════════════════════════════════════════════════


def attempt(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> ValueResult[T]:
    """Call fn, converting a raised Exception into Fail(ExceptionFailure(exc)).

    Example:
        >>> attempt(int, "12")
        Success(12)
        >>> attempt(int, "x").get_failure_or_throw().code
        'exception:ValueError'
    """
    try:
        return ValueResult(fn(*args, **kwargs), None)
    except Exception as e:
        return _captured(fn, e)


async def attempt_async(fn: Callable[..., MaybeAwaitable[T]], /, *args: Any, **kwargs: Any) -> ValueResult[T]:
    """Async version - fn may be sync or async. Cancellation is not captured."""
    try:
        return ValueResult(await resolve(fn(*args, **kwargs)), None)
    except Exception as e:
        return _captured(fn, e)


def _captured(fn: Callable[..., Any], exc: Exception) -> ValueResult[Any]:
    failure = ExceptionFailure(exc)
    _log.debug("exception captured", operation=getattr(fn, "__qualname__", repr(fn)), code=failure.code)
    return ValueResult(_MISSING, failure)
