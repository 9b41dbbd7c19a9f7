"""Railcase - Option, Result and Either containers for railway-oriented Python.

Failures are values, not exceptions: operations return a container, and
combinators chain the happy path while carrying absence, failures or Left
values through untouched.

Quick Start:
    >>> from railcase import Failure, Fail, Success, ValueResult
    >>>
    >>> def parse_age(raw: str) -> ValueResult[int]:
    ...     if not raw.isdigit():
    ...         return Fail(Failure(code="age.invalid", message=f"not a number: {raw!r}"))
    ...     return Success(int(raw))
    >>>
    >>> parse_age("42").check(lambda a: a < 150, lambda: Failure(code="age.range")).map(lambda a: a + 1)
    Success(43)

Collections (fail-fast vs error-collecting):
    >>> from railcase import aggregate, sequence
    >>> results = [parse_age("1"), parse_age("x"), parse_age("y")]
    >>> sequence(results).get_failure_or_throw().message      # first failure
    "not a number: 'x'"
    >>> aggregate(results).get_failure_or_throw().count       # every failure
    2

Options and Eithers:
    >>> from railcase import Nothing, Right, Some
    >>> Some(2).bind(lambda x: Nothing()).or_else(0)
    Some(0)
    >>> Right(3).select_many(lambda x: Right(5), lambda x, y: x + y)
    Right(8)

Async chains (callbacks may be sync or async):
    >>> from railcase import Pending
    >>> await Pending(fetch_user(7)).map(load_profile).unwrap_or(None)

Option- and Either-specific ``sequence``/``traverse`` live in
``railcase.options`` and ``railcase.eithers``; assertion helpers for tests live
in ``railcase.testing``.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Failures
from .failures import AggregateFailure, ExceptionFailure, Failure

# Options
from .options import (
    Nothing,
    Option,
    Some,
    all_values,
    any_values,
    as_option,
    as_option_async,
    count_values,
    first_or_none,
    last_or_none,
    values,
)

# Results
from .results import (
    Fail,
    Partition,
    Result,
    Success,
    ValueResult,
    aggregate,
    aggregate_async,
    aggregate_plain,
    aggregate_plain_async,
    attempt,
    attempt_async,
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

# Eithers
from .eithers import (
    Either,
    EitherPartition,
    Left,
    Right,
    any_left,
    any_right,
    count_left,
    count_right,
    lefts,
    rights,
    tap_all,
)

# Async chaining
from .pending import Pending

# Configuration & logging
from .config import RailcaseSettings, get_settings
from .observability import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Failures
    "Failure",
    "AggregateFailure",
    "ExceptionFailure",
    # Options
    "Option",
    "Some",
    "Nothing",
    "as_option",
    "as_option_async",
    "values",
    "count_values",
    "any_values",
    "all_values",
    "first_or_none",
    "last_or_none",
    # Results
    "Result",
    "ValueResult",
    "Success",
    "Fail",
    "attempt",
    "attempt_async",
    "sequence",
    "sequence_async",
    "traverse",
    "traverse_async",
    "aggregate",
    "aggregate_async",
    "aggregate_plain",
    "aggregate_plain_async",
    "Partition",
    "partition",
    "partition_async",
    "failures",
    "failures_async",
    "success_values",
    "success_values_async",
    # Eithers
    "Either",
    "Left",
    "Right",
    "EitherPartition",
    "lefts",
    "rights",
    "any_left",
    "any_right",
    "count_left",
    "count_right",
    "tap_all",
    # Async chaining
    "Pending",
    # Configuration & logging
    "RailcaseSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
