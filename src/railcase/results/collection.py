"""Collection operations over sequences of results.

Two strategies:
- Fail-fast: sequence, traverse return the first failure, later elements unvisited
- Error-collecting: aggregate, aggregate_plain visit everything and fold all
  failures into one AggregateFailure; partition, failures, success_values split

Example:
    >>> a, b = Failure(code="a"), Failure(code="b")
    >>> sequence([Success(1), Fail(a), Fail(b)]).get_failure_or_throw().code
    'a'
    >>> aggregate([Success(1), Fail(a), Fail(b)]).get_failure_or_throw().count
    2
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple, TypeVar, cast

from railcase._awaitable import MaybeAwaitable, gather_all, resolve
from railcase.failures import AggregateFailure, Failure
from railcase.observability import get_logger

from .result import Result, ValueResult

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger("railcase.results")


class Partition(NamedTuple):
    """Success values and failures, each in input order."""

    successes: list[Any]
    failures: list[Failure]


# ═════════════════════════════════════════════════════════════════════════════
# Fail-fast
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[ValueResult[T]]) -> ValueResult[list[T]]:
    """[ValueResult[T]] → ValueResult[[T]]. Returns the first failure encountered."""
    values: list[T] = []
    for index, result in enumerate(results):
        if result._failure is not None:
            _log.debug("result sequence short-circuited", index=index, code=result._failure.code)
            return ValueResult.failure(result._failure)
        values.append(cast(T, result._value))
    return ValueResult.success(values)


def traverse(items: Iterable[T], f: Callable[[T], ValueResult[U]]) -> ValueResult[list[U]]:
    """Map f over items, stopping at the first failure. f is not called after it."""
    values: list[U] = []
    for index, item in enumerate(items):
        result = f(item)
        if result._failure is not None:
            _log.debug("result traverse short-circuited", index=index, code=result._failure.code)
            return ValueResult.failure(result._failure)
        values.append(cast(U, result._value))
    return ValueResult.success(values)


# ═════════════════════════════════════════════════════════════════════════════
# Error-collecting
# ═════════════════════════════════════════════════════════════════════════════


def aggregate(results: Iterable[ValueResult[T]]) -> ValueResult[list[T]]:
    """Visit every result. Success(values) or Fail(AggregateFailure(all failures))."""
    split = partition(results)
    if split.failures:
        _log.debug("result aggregate collected failures", count=len(split.failures))
        return ValueResult.failure(AggregateFailure(split.failures))
    return ValueResult.success(split.successes)


def aggregate_plain(results: Iterable[Result]) -> Result:
    """Visit every plain result. Success or failure(AggregateFailure(all failures))."""
    collected = failures(results)
    if collected:
        _log.debug("result aggregate collected failures", count=len(collected))
        return Result.failure(AggregateFailure(collected))
    return Result.success()


def partition(results: Iterable[ValueResult[T]]) -> Partition:
    """Split into (success values, failures), both in input order."""
    split = Partition([], [])
    for result in results:
        if result._failure is not None:
            split.failures.append(result._failure)
        else:
            split.successes.append(result._value)
    return split


def failures(results: Iterable[Result | ValueResult[Any]]) -> list[Failure]:
    """Failures of plain or value results, in input order."""
    return [r._failure for r in results if r._failure is not None]


def success_values(results: Iterable[ValueResult[T]]) -> list[T]:
    return [cast(T, r._value) for r in results if r._failure is None]


# ═════════════════════════════════════════════════════════════════════════════
# Async Batch Forms
# ═════════════════════════════════════════════════════════════════════════════


async def sequence_async(results: Iterable[MaybeAwaitable[ValueResult[T]]]) -> ValueResult[list[T]]:
    """Await all pending results concurrently, then sequence them."""
    return sequence(await gather_all(results))


async def traverse_async(
    items: Iterable[MaybeAwaitable[T]],
    f: Callable[[T], MaybeAwaitable[ValueResult[U]]],
) -> ValueResult[list[U]]:
    """Await pending items concurrently, then apply f one item at a time, fail-fast."""
    values: list[U] = []
    for index, item in enumerate(await gather_all(items)):
        result: ValueResult[Any] = await resolve(f(item))
        if result._failure is not None:
            _log.debug("result traverse short-circuited", index=index, code=result._failure.code)
            return ValueResult.failure(result._failure)
        values.append(result._value)
    return ValueResult.success(values)


async def aggregate_async(results: Iterable[MaybeAwaitable[ValueResult[T]]]) -> ValueResult[list[T]]:
    return aggregate(await gather_all(results))


async def aggregate_plain_async(results: Iterable[MaybeAwaitable[Result]]) -> Result:
    return aggregate_plain(await gather_all(results))


async def partition_async(results: Iterable[MaybeAwaitable[ValueResult[T]]]) -> Partition:
    return partition(await gather_all(results))


async def failures_async(results: Iterable[MaybeAwaitable[Result | ValueResult[Any]]]) -> list[Failure]:
    return failures(await gather_all(results))


async def success_values_async(results: Iterable[MaybeAwaitable[ValueResult[T]]]) -> list[T]:
    return success_values(await gather_all(results))
