"""Failure model: structured, immutable descriptions of why an operation failed.

Failures are data, not exceptions. They travel inside failing results and are
never raised by the library. Uses Pydantic frozen models for structural
equality, hashing and non-destructive updates.

Example:
    >>> missing = Failure(code="user.missing", message="No such user")
    >>> str(missing)
    'No such user'
    >>> missing.replace(code="user.gone").code
    'user.gone'
    >>> AggregateFailure([missing, missing]).code
    'aggregate'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

AGGREGATE_CODE = "aggregate"
AGGREGATE_MESSAGE = "Multiple failures occurred"
EXCEPTION_CODE_PREFIX = "exception:"


class Failure(BaseModel):
    """Reason an operation did not succeed.

    Attributes:
        code: Short symbolic identifier for programmatic handling
        message: Human-readable explanation
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        json_schema_extra={
            "title": "Failure",
            "description": "Immutable description of a failed operation",
            "examples": [{"code": "user.missing", "message": "No such user"}],
        },
    )

    code: Annotated[str, Field(min_length=1, description="Symbolic failure identifier")]
    message: str = Field(default="", description="Human-readable failure message")

    @classmethod
    def create(cls, code: str, message: str = "") -> Self:
        """Factory method for positional construction."""
        return cls(code=code, message=message)

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced (original is untouched).

        Raises pydantic ValidationError when the changes break a field constraint.
        """
        return type(self).model_validate({**self._field_values(), **changes})

    def _field_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    def __str__(self) -> str:
        return self.message


class AggregateFailure(Failure):
    """Failure composed of an ordered, non-empty sequence of child failures.

    Children are kept exactly as given: nested aggregates are not flattened by
    construction, ``add`` or ``combine``. Use ``flatten`` for that.
    """

    code: Annotated[str, Field(min_length=1)] = AGGREGATE_CODE
    message: str = AGGREGATE_MESSAGE
    failures: Annotated[tuple[Failure, ...], Field(min_length=1, description="Child failures in order")]

    def __init__(self, failures: Iterable[Failure] | None = None, /, **data: Any) -> None:
        if failures is None and "failures" not in data:
            raise ValueError("AggregateFailure requires a collection of failures, got None")
        if failures is not None:
            data["failures"] = tuple(failures)
        if not data["failures"]:
            raise ValueError("AggregateFailure requires at least one failure")
        super().__init__(**data)

    @property
    def count(self) -> int:
        """Number of direct children."""
        return len(self.failures)

    def add(self, failure: Failure) -> AggregateFailure:
        """Return a new aggregate with failure appended."""
        return self.replace(failures=(*self.failures, failure))

    def combine(self, other: AggregateFailure) -> AggregateFailure:
        """Return a new aggregate holding this aggregate's children followed by other's."""
        return self.replace(failures=(*self.failures, *other.failures))

    def flatten(self) -> AggregateFailure:
        """Return a new aggregate with nested aggregates recursively expanded in order."""
        return self.replace(failures=tuple(_expand(self.failures)))

    def __str__(self) -> str:
        return f"{self.message}: " + "; ".join(str(f) for f in self.failures)


def _expand(failures: Iterable[Failure]) -> Iterator[Failure]:
    for failure in failures:
        if isinstance(failure, AggregateFailure):
            yield from _expand(failure.failures)
        else:
            yield failure


# Fields recomputed from the wrapped exception unless given explicitly
_EXCEPTION_DERIVED = ("code", "message", "exception_type")


class ExceptionFailure(Failure):
    """Failure derived from a caught exception.

    The code is synthesized as ``exception:<ExceptionType>`` and the message is
    the exception's text. Replacing ``exception`` recomputes both.

    Example:
        >>> failure = ExceptionFailure(KeyError("id"))
        >>> failure.code, failure.exception_type
        ('exception:KeyError', 'KeyError')
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    exception: BaseException = Field(exclude=True, repr=False, description="The wrapped exception")
    exception_type: str = Field(description="Class name of the wrapped exception")

    def __init__(self, exception: BaseException | None = None, /, **data: Any) -> None:
        if exception is not None:
            data["exception"] = exception
        elif "exception" not in data:
            raise ValueError("ExceptionFailure requires an exception, got None")
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def _derive_from_exception(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(exc := data.get("exception"), BaseException):
            name = type(exc).__name__
            return {"code": f"{EXCEPTION_CODE_PREFIX}{name}", "message": str(exc), "exception_type": name, **data}
        return data

    def replace(self, **changes: Any) -> Self:
        current = self._field_values()
        if "exception" in changes:
            for key in _EXCEPTION_DERIVED:
                current.pop(key)
        return type(self).model_validate({**current, **changes})
