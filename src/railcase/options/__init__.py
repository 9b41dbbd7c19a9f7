"""Option container and its collection operations."""

from .collection import (
    all_values,
    any_values,
    count_values,
    first,
    first_or_none,
    last,
    last_or_none,
    sequence,
    sequence_async,
    traverse,
    traverse_async,
    values,
)
from .option import Nothing, Option, Some, as_option, as_option_async

__all__ = [
    # Core type
    "Option", "Some", "Nothing", "as_option", "as_option_async",
    # Queries
    "values", "count_values", "any_values", "all_values",
    "first_or_none", "last_or_none", "first", "last",
    # Fail-fast lifting
    "sequence", "sequence_async", "traverse", "traverse_async",
]
