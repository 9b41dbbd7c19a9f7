"""Result containers, exception capture, and collection operations."""

from .collection import (
    Partition,
    aggregate,
    aggregate_async,
    aggregate_plain,
    aggregate_plain_async,
    failures,
    failures_async,
    partition,
    partition_async,
    sequence,
    sequence_async,
    success_values,
    success_values_async,
    traverse,
    traverse_async,
)
from .result import Fail, Result, Success, ValueResult, attempt, attempt_async

__all__ = [
    # Core types
    "Result", "ValueResult", "Success", "Fail",
    # Exception capture
    "attempt", "attempt_async",
    # Fail-fast
    "sequence", "sequence_async", "traverse", "traverse_async",
    # Error-collecting
    "Partition", "aggregate", "aggregate_async", "aggregate_plain", "aggregate_plain_async",
    "partition", "partition_async", "failures", "failures_async",
    "success_values", "success_values_async",
]
