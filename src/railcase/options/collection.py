"""Collection operations over sequences of options and plain values.

- Queries: values, count_values, any_values, all_values, first_or_none, last_or_none
- Plain-value lookups returning options: first, last
- Fail-fast lifting: sequence, traverse (absent as soon as one element is absent)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, cast

from railcase._awaitable import MaybeAwaitable, gather_all, resolve
from railcase.observability import get_logger

from .option import Nothing, Option

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger("railcase.options")


def _matches(option: Option[T], predicate: Callable[[T], bool] | None) -> bool:
    return option._has_value and (predicate is None or predicate(cast(T, option._value)))


# ═════════════════════════════════════════════════════════════════════════════
# Queries
# ═════════════════════════════════════════════════════════════════════════════


def values(
    options: Iterable[Option[T]],
    predicate: Callable[[T], bool] | None = None,
    *,
    selector: Callable[[T], Any] | None = None,
) -> list[Any]:
    """Held values in order, skipping absent options (and values failing predicate).

    With selector, each kept value is projected through it.
    """
    kept = [cast(T, o._value) for o in options if _matches(o, predicate)]
    return kept if selector is None else [selector(v) for v in kept]


def count_values(options: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> int:
    return sum(1 for o in options if _matches(o, predicate))


def any_values(options: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if some option holds a (matching) value. Stops at the first hit."""
    return any(_matches(o, predicate) for o in options)


def all_values(options: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if every option holds a (matching) value. Vacuously true when empty."""
    return all(_matches(o, predicate) for o in options)


def first_or_none(options: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """First present (matching) option, or Nothing()."""
    return next((o for o in options if _matches(o, predicate)), Nothing())


def last_or_none(options: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """Last present (matching) option, or Nothing()."""
    found: Option[T] = Nothing()
    for o in options:
        if _matches(o, predicate):
            found = o
    return found


def first(items: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """First (matching) plain item wrapped in Some, or Nothing(). A None item raises ValueError."""
    for item in items:
        if predicate is None or predicate(item):
            return Option.some(item)
    return Nothing()


def last(items: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """Last (matching) plain item wrapped in Some, or Nothing(). A None item raises ValueError."""
    found, last_item = False, cast(T, None)
    for item in items:
        if predicate is None or predicate(item):
            found, last_item = True, item
    return Option.some(last_item) if found else Nothing()


# ═════════════════════════════════════════════════════════════════════════════
# Fail-fast Lifting
# ═════════════════════════════════════════════════════════════════════════════


def sequence(options: Iterable[Option[T]]) -> Option[list[T]]:
    """[Option[T]] → Option[[T]]. Absent on the first absent element."""
    collected: list[T] = []
    for index, option in enumerate(options):
        if not option._has_value:
            _log.debug("option sequence short-circuited", index=index)
            return Nothing()
        collected.append(cast(T, option._value))
    return Option.some(collected)


def traverse(items: Iterable[T], f: Callable[[T], Option[U]]) -> Option[list[U]]:
    """Map f over items, stopping at the first absent result."""
    collected: list[U] = []
    for index, item in enumerate(items):
        option = f(item)
        if not option._has_value:
            _log.debug("option traverse short-circuited", index=index)
            return Nothing()
        collected.append(cast(U, option._value))
    return Option.some(collected)


async def sequence_async(options: Iterable[MaybeAwaitable[Option[T]]]) -> Option[list[T]]:
    """Await all pending options concurrently, then sequence them."""
    return sequence(await gather_all(options))


async def traverse_async(
    items: Iterable[MaybeAwaitable[T]],
    f: Callable[[T], MaybeAwaitable[Option[U]]],
) -> Option[list[U]]:
    """Await pending items concurrently, then apply f one item at a time, fail-fast."""
    collected: list[U] = []
    for index, item in enumerate(await gather_all(items)):
        option: Option[Any] = await resolve(f(item))
        if not option._has_value:
            _log.debug("option traverse short-circuited", index=index)
            return Nothing()
        collected.append(option._value)
    return Option.some(collected)
