"""Either: exactly one of two values, Left or Right.

Right is the continuing ("happy") side: ``bind``, ``map`` and ``tap`` act on it
and carry a Left through untouched. Neither side may hold None.

Example:
    >>> Right(3).bind(lambda x: Right(x + 1)).map(str)
    Right('4')
    >>> Left("bad").map(lambda x: x + 1).swap()
    Right('bad')
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar, cast

from railcase._awaitable import MaybeAwaitable, resolve

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
M = TypeVar("M")
U = TypeVar("U")

_LEFT_MISSING = "Either does not contain a left value."
_RIGHT_MISSING = "Either does not contain a right value."


class Either(Generic[L, R]):
    """A Left[L] or a Right[R]. Construct with Left()/Right() or Either.left()/Either.right()."""

    __slots__ = ("_left", "_right", "_is_right")
    __match_args__ = ("_left", "_right")

    def __init__(self, left: L | None, right: R | None, is_right: bool) -> None:
        """Private constructor. Use Left() or Right() instead."""
        self._left = left
        self._right = right
        self._is_right = is_right

    @classmethod
    def left(cls, value: L) -> Either[L, R]:
        """Raises ValueError on None."""
        if value is None:
            raise ValueError("Either.left() requires a value, got None")
        return cls(value, None, False)

    @classmethod
    def right(cls, value: R) -> Either[L, R]:
        """Raises ValueError on None."""
        if value is None:
            raise ValueError("Either.right() requires a value, got None")
        return cls(None, value, True)

    # ─── Inspection ──────────────────────────────────────────────────

    def is_left(self) -> bool:
        return not self._is_right

    def is_right(self) -> bool:
        return self._is_right

    def try_get_left(self) -> tuple[bool, L | None]:
        return not self._is_right, self._left

    def try_get_right(self) -> tuple[bool, R | None]:
        return self._is_right, self._right

    def get_or_throw(self, error_factory: Callable[[], BaseException] | None = None) -> R:
        """Right value, or raise RuntimeError (or error_factory()) on Left."""
        if self._is_right:
            return cast(R, self._right)
        raise error_factory() if error_factory else RuntimeError(_RIGHT_MISSING)

    def get_left_or_throw(self, error_factory: Callable[[], BaseException] | None = None) -> L:
        """Left value, or raise RuntimeError (or error_factory()) on Right."""
        if not self._is_right:
            return cast(L, self._left)
        raise error_factory() if error_factory else RuntimeError(_LEFT_MISSING)

    # ─── Functor / Monad ─────────────────────────────────────────────

    def bind(self, f: Callable[[R], Either[L, R2]]) -> Either[L, R2]:
        """Continue with f on Right; a Left propagates unchanged."""
        return f(cast(R, self._right)) if self._is_right else cast(Either[L, R2], self)

    async def bind_async(self, f: Callable[[R], MaybeAwaitable[Either[L, R2]]]) -> Either[L, R2]:
        if not self._is_right:
            return cast(Either[L, R2], self)
        return await resolve(f(cast(R, self._right)))

    def map(self, f: Callable[[R], R2]) -> Either[L, R2]:
        """Project the Right value."""
        return Either.right(f(cast(R, self._right))) if self._is_right else cast(Either[L, R2], self)

    select = map

    async def map_async(self, f: Callable[[R], MaybeAwaitable[R2]]) -> Either[L, R2]:
        if not self._is_right:
            return cast(Either[L, R2], self)
        return Either.right(await resolve(f(cast(R, self._right))))

    def map_left(self, f: Callable[[L], L2]) -> Either[L2, R]:
        """Project the Left value."""
        return cast(Either[L2, R], self) if self._is_right else Either.left(f(cast(L, self._left)))

    async def map_left_async(self, f: Callable[[L], MaybeAwaitable[L2]]) -> Either[L2, R]:
        if self._is_right:
            return cast(Either[L2, R], self)
        return Either.left(await resolve(f(cast(L, self._left))))

    def bimap(self, on_left: Callable[[L], L2], on_right: Callable[[R], R2]) -> Either[L2, R2]:
        """Project whichever side is present; exactly one function runs."""
        if self._is_right:
            return Either.right(on_right(cast(R, self._right)))
        return Either.left(on_left(cast(L, self._left)))

    async def bimap_async(
        self,
        on_left: Callable[[L], MaybeAwaitable[L2]],
        on_right: Callable[[R], MaybeAwaitable[R2]],
    ) -> Either[L2, R2]:
        if self._is_right:
            return Either.right(await resolve(on_right(cast(R, self._right))))
        return Either.left(await resolve(on_left(cast(L, self._left))))

    def select_many(self, binder: Callable[[R], Either[L, M]], projector: Callable[[R, M], U]) -> Either[L, U]:
        """Bind then project both Right values; the first Left wins."""
        if not self._is_right:
            return cast(Either[L, U], self)
        intermediate = binder(cast(R, self._right))
        if not intermediate._is_right:
            return cast(Either[L, U], intermediate)
        return Either.right(projector(cast(R, self._right), cast(M, intermediate._right)))

    def swap(self) -> Either[R, L]:
        """Left(x) becomes Right(x) and vice versa."""
        return Either(self._right, self._left, not self._is_right)

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, left: Callable[[L], U], right: Callable[[R], U]) -> U:
        """Exhaustive case analysis; exactly one branch runs."""
        return right(cast(R, self._right)) if self._is_right else left(cast(L, self._left))

    async def match_async(
        self,
        *,
        left: Callable[[L], MaybeAwaitable[U]],
        right: Callable[[R], MaybeAwaitable[U]],
    ) -> U:
        return await resolve(right(cast(R, self._right)) if self._is_right else left(cast(L, self._left)))

    # ─── Side Effects ────────────────────────────────────────────────

    def tap(self, action: Callable[[R], Any]) -> Either[L, R]:
        """Call action with the Right value, return self."""
        if self._is_right:
            action(cast(R, self._right))
        return self

    async def tap_async(self, action: Callable[[R], MaybeAwaitable[Any]]) -> Either[L, R]:
        if self._is_right:
            await resolve(action(cast(R, self._right)))
        return self

    def tap_left(self, action: Callable[[L], Any]) -> Either[L, R]:
        """Call action with the Left value, return self."""
        if not self._is_right:
            action(cast(L, self._left))
        return self

    async def tap_left_async(self, action: Callable[[L], MaybeAwaitable[Any]]) -> Either[L, R]:
        if not self._is_right:
            await resolve(action(cast(L, self._left)))
        return self

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[R]:
        """Yields the Right value, nothing for a Left."""
        if self._is_right:
            yield cast(R, self._right)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return (self._is_right, self._left, self._right) == (other._is_right, other._left, other._right)

    def __hash__(self) -> int:
        return hash((Either, self._is_right, self._left, self._right))

    def __repr__(self) -> str:
        return f"Right({self._right!r})" if self._is_right else f"Left({self._left!r})"

    def __str__(self) -> str:
        return str(self._right) if self._is_right else str(self._left)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Left(value: L) -> Either[L, Any]:  # noqa: N802
    """Construct a Left. Raises ValueError on None."""
    return Either.left(value)


def Right(value: R) -> Either[Any, R]:  # noqa: N802
    """Construct a Right. Raises ValueError on None."""
    return Either.right(value)
