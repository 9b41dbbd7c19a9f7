"""Option: a value that may or may not be present.

Presence never means "holds None": ``Some(None)`` is rejected, and absence has
exactly one canonical instance, so ``Nothing() is Nothing()`` always holds.

Each combinator has a synchronous form and an ``*_async`` coroutine form whose
callbacks may return plain values or awaitables.

Example:
    >>> Some(4).check(lambda x: x % 2 == 0).map(lambda x: x * 10)
    Some(40)
    >>> Nothing().or_else(7)
    Some(7)
    >>> as_option(None).match(some=str, none=lambda: "missing")
    'missing'
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import Any, Generic, TypeVar, cast

from railcase._awaitable import MaybeAwaitable, resolve

T = TypeVar("T")
U = TypeVar("U")
M = TypeVar("M")


class Option(Generic[T]):
    """Presence or absence of a value of type T.

    Construct with ``Some(value)`` / ``Option.some(value)`` or ``Nothing()`` /
    ``Option.none()``; the constructor itself is private.
    """

    __slots__ = ("_value", "_has_value")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, has_value: bool) -> None:
        """Private constructor. Use Some() or Nothing() instead."""
        self._value = value
        self._has_value = has_value

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Wrap a non-None value. Raises ValueError on None."""
        if value is None:
            raise ValueError("Option.some() requires a value, got None; use Nothing() for absence")
        return cls(value, True)

    @classmethod
    def none(cls) -> Option[T]:
        """The canonical absent option."""
        return cast(Option[T], _NOTHING)

    # ─── Inspection ──────────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._has_value

    def is_none(self) -> bool:
        return not self._has_value

    def try_get_value(self) -> tuple[bool, T | None]:
        """Non-throwing access: (True, value) when present, (False, None) otherwise."""
        return self._has_value, self._value

    def equal_value(self, other: T) -> bool:
        """True when present and the held value equals other."""
        return self._has_value and self._value == other

    def unwrap_or(self, default: T) -> T:
        """Held value, or default when absent."""
        return cast(T, self._value) if self._has_value else default

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the held value. f must not return None."""
        return Option.some(f(cast(T, self._value))) if self._has_value else Option.none()

    select = map

    async def map_async(self, f: Callable[[T], MaybeAwaitable[U]]) -> Option[U]:
        if not self._has_value:
            return Option.none()
        return Option.some(await resolve(f(cast(T, self._value))))

    def bind(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an option-returning function. f's result is taken verbatim."""
        return f(cast(T, self._value)) if self._has_value else Option.none()

    async def bind_async(self, f: Callable[[T], MaybeAwaitable[Option[U]]]) -> Option[U]:
        if not self._has_value:
            return Option.none()
        return await resolve(f(cast(T, self._value)))

    def select_many(self, binder: Callable[[T], Option[M]], projector: Callable[[T, M], U]) -> Option[U]:
        """Bind then project both values; absent as soon as either step is absent."""
        if not self._has_value:
            return Option.none()
        intermediate = binder(cast(T, self._value))
        if not intermediate._has_value:
            return Option.none()
        return Option.some(projector(cast(T, self._value), cast(M, intermediate._value)))

    # ─── Filtering & Fallbacks ───────────────────────────────────────

    def check(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate holds."""
        return self if self._has_value and predicate(cast(T, self._value)) else Option.none()

    async def check_async(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> Option[T]:
        if self._has_value and await resolve(predicate(cast(T, self._value))):
            return self
        return Option.none()

    def or_else(self, alternative: T) -> Option[T]:
        """Replace absence with Some(alternative)."""
        return self if self._has_value else Option.some(alternative)

    def or_else_with(self, factory: Callable[[], T]) -> Option[T]:
        """Replace absence with Some(factory()); factory is not called when present."""
        return self if self._has_value else Option.some(factory())

    async def or_else_async(self, factory: Callable[[], MaybeAwaitable[T]]) -> Option[T]:
        return self if self._has_value else Option.some(await resolve(factory()))

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        """Exhaustive case analysis; exactly one branch runs."""
        return some(cast(T, self._value)) if self._has_value else none()

    async def match_async(
        self,
        *,
        some: Callable[[T], MaybeAwaitable[U]],
        none: Callable[[], MaybeAwaitable[U]],
    ) -> U:
        return await resolve(some(cast(T, self._value)) if self._has_value else none())

    # ─── Side Effects ────────────────────────────────────────────────

    def tap(self, action: Callable[[T], Any]) -> Option[T]:
        """Call action with the value when present, return self."""
        if self._has_value:
            action(cast(T, self._value))
        return self

    async def tap_async(self, action: Callable[[T], MaybeAwaitable[Any]]) -> Option[T]:
        if self._has_value:
            await resolve(action(cast(T, self._value)))
        return self

    def tap_if_none(self, action: Callable[[], Any]) -> Option[T]:
        """Call action when absent, return self."""
        if not self._has_value:
            action()
        return self

    async def tap_if_none_async(self, action: Callable[[], MaybeAwaitable[Any]]) -> Option[T]:
        if not self._has_value:
            await resolve(action())
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._has_value

    def __iter__(self) -> Iterator[T]:
        """Yields the value if present, nothing otherwise."""
        if self._has_value:
            yield cast(T, self._value)

    def __eq__(self, other: object) -> bool:
        """Structural equality; held values must also share a type, so Some(1) != Some(True)."""
        if not isinstance(other, Option):
            return NotImplemented
        return (
            self._has_value == other._has_value
            and type(self._value) is type(other._value)
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self._has_value, type(self._value), self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._has_value else "Nothing"

    def __str__(self) -> str:
        return str(self._value) if self._has_value else ""


_NOTHING: Option[Any] = Option(None, False)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present option. Raises ValueError on None."""
    return Option.some(value)


def Nothing() -> Option[Any]:  # noqa: N802
    """The canonical absent option."""
    return _NOTHING


def as_option(value: T | None) -> Option[T]:
    """None becomes Nothing(), anything else Some(value)."""
    return _NOTHING if value is None else Option(value, True)


async def as_option_async(value: Awaitable[T | None]) -> Option[T]:
    """Await value, then convert it with as_option."""
    return as_option(await value)
