"""Tests for the Failure model family."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from railcase.failures import AGGREGATE_CODE, AGGREGATE_MESSAGE, AggregateFailure, ExceptionFailure, Failure


# ═════════════════════════════════════════════════════════════════════════════
# Failure
# ═════════════════════════════════════════════════════════════════════════════


def test_failure_is_structural_value() -> None:
    """Equal fields mean equal failures, usable as dict keys."""
    a = Failure(code="user.missing", message="No such user")
    b = Failure.create("user.missing", "No such user")

    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1


def test_failure_is_immutable() -> None:
    failure = Failure(code="x")
    with pytest.raises(ValidationError):
        failure.code = "y"  # type: ignore[misc]


def test_failure_requires_non_empty_code() -> None:
    with pytest.raises(ValidationError):
        Failure(code="")


def test_failure_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Failure(code="x", severity="high")  # type: ignore[call-arg]


def test_replace_returns_copy() -> None:
    original = Failure(code="a", message="first")
    changed = original.replace(message="second")

    assert changed == Failure(code="a", message="second")
    assert original.message == "first"


def test_str_is_message() -> None:
    assert str(Failure(code="a", message="went wrong")) == "went wrong"


# ═════════════════════════════════════════════════════════════════════════════
# AggregateFailure
# ═════════════════════════════════════════════════════════════════════════════


def test_aggregate_defaults() -> None:
    children = [Failure(code="a"), Failure(code="b")]
    aggregate = AggregateFailure(children)

    assert aggregate.code == AGGREGATE_CODE
    assert aggregate.message == AGGREGATE_MESSAGE
    assert aggregate.failures == tuple(children)
    assert aggregate.count == 2


def test_aggregate_rejects_none() -> None:
    with pytest.raises(ValueError):
        AggregateFailure(None)


def test_aggregate_rejects_empty() -> None:
    with pytest.raises(ValueError):
        AggregateFailure([])


def test_aggregate_accepts_keyword_form() -> None:
    aggregate = AggregateFailure(failures=[Failure(code="a")], message="custom")
    assert aggregate.message == "custom"
    assert aggregate.count == 1


def test_add_grows_by_one_and_keeps_original() -> None:
    original = AggregateFailure([Failure(code="a")])
    grown = original.add(Failure(code="b"))

    assert grown.count == original.count + 1
    assert [f.code for f in grown.failures] == ["a", "b"]
    assert original.count == 1


def test_combine_appends_other_children_in_order() -> None:
    left = AggregateFailure([Failure(code="a"), Failure(code="b")])
    right = AggregateFailure([Failure(code="c")])
    combined = left.combine(right)

    assert combined.count == left.count + right.count
    assert [f.code for f in combined.failures] == ["a", "b", "c"]


def test_nested_aggregates_kept_until_flattened() -> None:
    """add() keeps a nested aggregate as a single child; flatten() expands it."""
    inner = AggregateFailure([Failure(code="b"), Failure(code="c")])
    outer = AggregateFailure([Failure(code="a")]).add(inner)

    assert outer.count == 2
    assert outer.failures[1] is inner

    flat = outer.flatten()
    assert [f.code for f in flat.failures] == ["a", "b", "c"]


def test_aggregate_str_lists_children() -> None:
    aggregate = AggregateFailure([Failure(code="a", message="one"), Failure(code="b", message="two")])
    assert str(aggregate) == f"{AGGREGATE_MESSAGE}: one; two"


def test_aggregate_is_a_failure() -> None:
    assert isinstance(AggregateFailure([Failure(code="a")]), Failure)


# ═════════════════════════════════════════════════════════════════════════════
# ExceptionFailure
# ═════════════════════════════════════════════════════════════════════════════


def test_exception_failure_derives_fields() -> None:
    exc = KeyError("id")
    failure = ExceptionFailure(exc)

    assert failure.code == "exception:KeyError"
    assert failure.exception_type == "KeyError"
    assert failure.message == str(exc)
    assert failure.exception is exc


def test_exception_failure_requires_exception() -> None:
    with pytest.raises(ValueError):
        ExceptionFailure(None)


def test_exception_failure_excluded_from_dump() -> None:
    dumped = ExceptionFailure(RuntimeError("boom")).model_dump()

    assert "exception" not in dumped
    assert dumped["code"] == "exception:RuntimeError"
    assert dumped["message"] == "boom"


# ═════════════════════════════════════════════════════════════════════════════
# Validated Updates & Serialization
# ═════════════════════════════════════════════════════════════════════════════


def test_replace_validates_code() -> None:
    """replace() runs field constraints: an empty code is rejected."""
    with pytest.raises(ValidationError):
        Failure(code="a").replace(code="")


def test_replace_cannot_empty_an_aggregate() -> None:
    """An aggregate stays non-empty through every update path."""
    aggregate = AggregateFailure([Failure(code="a")])

    with pytest.raises(ValidationError):
        aggregate.replace(failures=())
    assert aggregate.count == 1


def test_add_rejects_non_failure() -> None:
    with pytest.raises(ValidationError):
        AggregateFailure([Failure(code="a")]).add("not a failure")  # type: ignore[arg-type]


def test_replace_rejects_unknown_field() -> None:
    with pytest.raises(ValidationError):
        Failure(code="a").replace(severity="high")


def test_replacing_exception_recomputes_derived_fields() -> None:
    """Swapping the wrapped exception keeps code, message and exception_type in sync."""
    replaced = ExceptionFailure(KeyError("id")).replace(exception=ValueError("bad"))

    assert replaced.code == "exception:ValueError"
    assert replaced.exception_type == "ValueError"
    assert replaced.message == "bad"
    assert isinstance(replaced.exception, ValueError)


def test_replacing_exception_keeps_explicit_overrides() -> None:
    replaced = ExceptionFailure(KeyError("id")).replace(exception=ValueError("bad"), code="parse")

    assert replaced.code == "parse"
    assert replaced.exception_type == "ValueError"


def test_replace_message_keeps_exception() -> None:
    exc = KeyError("id")
    replaced = ExceptionFailure(exc).replace(message="lookup failed")

    assert replaced.message == "lookup failed"
    assert replaced.code == "exception:KeyError"
    assert replaced.exception is exc


def test_aggregate_dump_validates_back() -> None:
    """model_dump() output is accepted by model_validate() and yields an equal aggregate."""
    aggregate = AggregateFailure([Failure(code="a", message="one"), Failure(code="b")])
    dumped = aggregate.model_dump()

    assert "count" not in dumped
    restored = AggregateFailure.model_validate(dumped)
    assert restored == aggregate
    assert restored.count == 2


def test_failure_json_round_trip() -> None:
    failure = Failure(code="user.missing", message="No such user")
    assert Failure.model_validate_json(failure.model_dump_json()) == failure
