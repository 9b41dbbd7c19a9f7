"""Collection operations over sequences of eithers.

- Fail-fast: sequence, traverse return the first Left
- Splitting and queries: partition, lefts, rights, any_left, any_right,
  count_left, count_right
- Side effects: tap_all
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NamedTuple, TypeVar, cast

from railcase._awaitable import MaybeAwaitable, gather_all, resolve
from railcase.observability import get_logger

from .either import Either

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")

_log = get_logger("railcase.eithers")


class EitherPartition(NamedTuple):
    """Left and Right values, each in input order."""

    lefts: list[Any]
    rights: list[Any]


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """[Either[L, R]] → Either[L, [R]]. Returns the first Left encountered."""
    values: list[R] = []
    for index, either in enumerate(eithers):
        if not either._is_right:
            _log.debug("either sequence short-circuited", index=index)
            return cast(Either[L, list[R]], either)
        values.append(cast(R, either._right))
    return Either.right(values)


def traverse(items: Iterable[U], f: Callable[[U], Either[L, R]]) -> Either[L, list[R]]:
    """Map f over items, stopping at the first Left. f is not called after it."""
    values: list[R] = []
    for index, item in enumerate(items):
        either = f(item)
        if not either._is_right:
            _log.debug("either traverse short-circuited", index=index)
            return cast(Either[L, list[R]], either)
        values.append(cast(R, either._right))
    return Either.right(values)


def partition(eithers: Iterable[Either[L, R]]) -> EitherPartition:
    """Split into (left values, right values), both in input order."""
    split = EitherPartition([], [])
    for either in eithers:
        if either._is_right:
            split.rights.append(either._right)
        else:
            split.lefts.append(either._left)
    return split


def lefts(eithers: Iterable[Either[L, R]]) -> list[L]:
    return [cast(L, e._left) for e in eithers if not e._is_right]


def rights(eithers: Iterable[Either[L, R]]) -> list[R]:
    return [cast(R, e._right) for e in eithers if e._is_right]


def any_left(eithers: Iterable[Either[L, R]]) -> bool:
    return any(not e._is_right for e in eithers)


def any_right(eithers: Iterable[Either[L, R]]) -> bool:
    return any(e._is_right for e in eithers)


def count_left(eithers: Iterable[Either[L, R]]) -> int:
    return sum(1 for e in eithers if not e._is_right)


def count_right(eithers: Iterable[Either[L, R]]) -> int:
    return sum(1 for e in eithers if e._is_right)


def tap_all(eithers: Iterable[Either[L, R]], action: Callable[[R], Any]) -> None:
    """Run action on every Right value in order; Lefts are skipped."""
    for either in eithers:
        if either._is_right:
            action(cast(R, either._right))


# ═════════════════════════════════════════════════════════════════════════════
# Async Batch Forms
# ═════════════════════════════════════════════════════════════════════════════


async def sequence_async(eithers: Iterable[MaybeAwaitable[Either[L, R]]]) -> Either[L, list[R]]:
    """Await all pending eithers concurrently, then sequence them."""
    return sequence(await gather_all(eithers))


async def traverse_async(
    items: Iterable[MaybeAwaitable[U]],
    f: Callable[[U], MaybeAwaitable[Either[L, R]]],
) -> Either[L, list[R]]:
    """Await pending items concurrently, then apply f one item at a time, fail-fast."""
    values: list[R] = []
    for index, item in enumerate(await gather_all(items)):
        either: Either[Any, Any] = await resolve(f(item))
        if not either._is_right:
            _log.debug("either traverse short-circuited", index=index)
            return either
        values.append(either._right)
    return Either.right(values)


async def partition_async(eithers: Iterable[MaybeAwaitable[Either[L, R]]]) -> EitherPartition:
    return partition(await gather_all(eithers))
