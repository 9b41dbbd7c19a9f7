"""Helpers for callables that may return either a value or an awaitable.

Every ``*_async`` combinator funnels its callback results through ``resolve``
so a single implementation accepts plain and coroutine functions alike.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Iterable
from typing import TypeVar, Union

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


async def gather_all(items: Iterable[MaybeAwaitable[T]]) -> list[T]:
    """Resolve all items concurrently, preserving input order.

    Plain values pass straight through; awaitables are driven by a single
    ``asyncio.gather`` call, so a failing awaitable propagates unmodified.
    """
    materialized = list(items)
    if not any(inspect.isawaitable(item) for item in materialized):
        return materialized  # type: ignore[return-value]
    return list(await asyncio.gather(*(resolve(item) for item in materialized)))
