"""Either container and its collection operations."""

from .collection import (
    EitherPartition,
    any_left,
    any_right,
    count_left,
    count_right,
    lefts,
    partition,
    partition_async,
    rights,
    sequence,
    sequence_async,
    tap_all,
    traverse,
    traverse_async,
)
from .either import Either, Left, Right

__all__ = [
    # Core type
    "Either", "Left", "Right",
    # Fail-fast
    "sequence", "sequence_async", "traverse", "traverse_async",
    # Splitting & queries
    "EitherPartition", "partition", "partition_async", "lefts", "rights",
    "any_left", "any_right", "count_left", "count_right", "tap_all",
]
