"""Pending: fluent chaining over a container that has not been computed yet.

Wraps an awaitable that yields an Option, ValueResult, Result or Either and
re-exposes every method of that container. Each call returns a new Pending;
nothing runs until the final Pending is awaited.

Example:
    >>> async def load(user_id: int) -> ValueResult[dict]:
    ...     ...
    >>>
    >>> name = await (
    ...     Pending(load(7))
    ...     .check(lambda u: u["active"], lambda: Failure(code="inactive"))
    ...     .map(fetch_display_name)        # async or sync callables
    ...     .unwrap_or("anonymous")
    ... )

Calling ``name(...)`` awaits the source once, then invokes ``name_async`` when
the container has it (``name`` otherwise) and awaits the outcome if needed.
Like a coroutine, each Pending may be awaited once.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

from railcase._awaitable import resolve

C = TypeVar("C")

# Async counterpart for names that do not follow the ``<name>_async`` rule.
# None keeps the sync method: its async form takes a factory, not a value.
_ASYNC_NAMES: dict[str, str | None] = {
    "select": "map_async",
    "or_else": None,
    "or_else_with": "or_else_async",
    "with_value": None,
    "with_value_from": "with_value_async",
}


async def _ready(value: C) -> C:
    return value


class Pending(Generic[C]):
    """Awaitable container receiver with the wrapped container's combinators."""

    __slots__ = ("_source",)

    def __init__(self, source: Awaitable[C]) -> None:
        self._source = source

    @classmethod
    def of(cls, container: C) -> Pending[C]:
        """Start a chain from an already-resolved container."""
        return cls(_ready(container))

    def __await__(self) -> Generator[Any, None, C]:
        return self._source.__await__()

    def __getattr__(self, name: str) -> Callable[..., Pending[Any]]:
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        def call(*args: Any, **kwargs: Any) -> Pending[Any]:
            return Pending(self._invoke(name, args, kwargs))

        call.__name__ = name
        return call

    async def _invoke(self, name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        container = await self._source
        async_name = _ASYNC_NAMES.get(name, f"{name}_async")
        method = (getattr(container, async_name, None) if async_name else None) or getattr(container, name)
        return await resolve(method(*args, **kwargs))

    def __repr__(self) -> str:
        return f"Pending({self._source!r})"
