"""Error types: ErrorAggregate and the extraction errors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeIs

__all__ = [
    'ErrorAggregate',
    'OptionUnwrapError',
    'ResultUnwrapError',
    'is_error_aggregate',
]


class OptionUnwrapError(RuntimeError):
    """Raised when a value is forcibly extracted from Nothing."""

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(msg or 'Cannot unwrap value of a None variant')


class ResultUnwrapError(RuntimeError):
    """Raised when an Err is forcibly extracted and the error cannot be raised as-is.

    Attributes:
        error: The payload of the Err that was unwrapped.
    """

    def __init__(self, msg: str, error: object) -> None:
        self.error = error
        super().__init__(msg)


class ErrorAggregate(Exception):
    """Ordered, immutable collection of errors.

    Produced by the collect-all aggregation functions. Every operation
    returns a new aggregate; the members keep their original order and
    identity and are never deduplicated. An empty aggregate is a legal
    value and is used as an accumulator seed.

    Examples:
        >>> agg = ErrorAggregate(ValueError('a')).append(KeyError('b'))
        >>> agg.has_errors()
        True
        >>> print(agg.message)
        a
        'b'
    """

    def __init__(self, *errors: Any) -> None:
        self._errors: tuple[Any, ...] = errors
        super().__init__(*errors)

    @property
    def errors(self) -> tuple[Any, ...]:
        """Members in insertion order."""
        return self._errors

    @property
    def message(self) -> str:
        """Newline-joined messages of every member, in order."""
        return '\n'.join(str(e) for e in self._errors)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'ErrorAggregate({", ".join(repr(e) for e in self._errors)})'

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorAggregate):
            return NotImplemented
        return self._errors == other._errors

    def __hash__(self) -> int:
        return hash((ErrorAggregate, self._errors))

    def append(self, *errors: Any) -> ErrorAggregate:
        """Return a new aggregate with `errors` added after the current members."""
        return ErrorAggregate(*self._errors, *errors)

    def prepend(self, *errors: Any) -> ErrorAggregate:
        """Return a new aggregate with `errors` placed before the current members."""
        return ErrorAggregate(*errors, *self._errors)

    def merge(self, other: ErrorAggregate) -> ErrorAggregate:
        """Concatenate two aggregates, left members first."""
        return ErrorAggregate(*self._errors, *other.errors)

    def has_errors(self) -> bool:
        """Return True if the aggregate holds at least one error."""
        return len(self._errors) > 0


def is_error_aggregate(value: object) -> TypeIs[ErrorAggregate]:
    """Return True if `value` is an ErrorAggregate."""
    return isinstance(value, ErrorAggregate)
