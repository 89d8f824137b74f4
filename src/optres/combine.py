"""Aggregation functions over groups of Options and Results.

Fail-fast functions (`all_options`, `all_results`) stop at the first
failure. Collect-all functions (`try_all_results`, `any_results`) inspect
every operand and gather the errors into an ErrorAggregate.
"""

from __future__ import annotations

from typing import Any

from optres.errors import ErrorAggregate
from optres.option import Nothing, NothingType, Option, Some
from optres.result import Err, Ok, Result

__all__ = [
    'all_options',
    'all_results',
    'any_options',
    'any_results',
    'transpose_option',
    'transpose_result',
    'try_all_results',
]


def all_options(*options: Option[Any]) -> Option[list[Any]]:
    """Return Some of every value if all options are Some.

    Short-circuits: returns Nothing at the first Nothing.

    Examples:
        >>> all_options(Some(1), Some(2))
        Some(value=[1, 2])
        >>> all_options(Some(1), Nothing, Some(3))
        NothingType()
    """
    values: list[Any] = []
    for option in options:
        if isinstance(option, NothingType):
            return option
        values.append(option.value)
    return Some(values)


def any_options(*options: Option[Any]) -> Option[Any]:
    """Return the first Some, or Nothing if there is none."""
    for option in options:
        if isinstance(option, Some):
            return option
    return Nothing


def all_results(*results: Result[Any, Any]) -> Result[list[Any], Any]:
    """Return Ok of every value, or the first Err encountered.

    Examples:
        >>> all_results(Ok(1), Ok(2))
        Ok(value=[1, 2])
        >>> all_results(Ok(1), Err('a'), Err('b'))
        Err(error='a')
    """
    values: list[Any] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def try_all_results(*results: Result[Any, Any]) -> Result[list[Any], ErrorAggregate]:
    """Evaluate every result, collecting all errors.

    Returns:
        Ok(list) if no operand is Err, otherwise Err(ErrorAggregate) holding
        every error in operand order.
    """
    values: list[Any] = []
    errors = ErrorAggregate()
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors = errors.append(result.error)

    if errors.has_errors():
        return Err(errors)
    return Ok(values)


def any_results(*results: Result[Any, Any]) -> Result[Any, ErrorAggregate]:
    """Return the first Ok, or Err(ErrorAggregate) of every error in order."""
    errors = ErrorAggregate()
    for result in results:
        if isinstance(result, Ok):
            return result
        errors = errors.append(result.error)
    return Err(errors)


def transpose_option[T, E](option: Option[Result[T, E]]) -> Result[Option[T], E]:
    """Swap Option[Result[T, E]] into Result[Option[T], E].

    Nothing becomes Ok(Nothing), Some(Ok(v)) becomes Ok(Some(v)) and
    Some(Err(e)) becomes Err(e).
    """
    if isinstance(option, NothingType):
        return Ok(Nothing)
    inner = option.value
    if isinstance(inner, Ok):
        return Ok(Some(inner.value))
    return inner


def transpose_result[T, E](result: Result[Option[T], E]) -> Option[Result[T, E]]:
    """Swap Result[Option[T], E] into Option[Result[T, E]].

    Ok(Nothing) becomes Nothing, Ok(Some(v)) becomes Some(Ok(v)) and
    Err(e) becomes Some(Err(e)).
    """
    if isinstance(result, Err):
        return Some(result)
    inner = result.value
    if isinstance(inner, NothingType):
        return Nothing
    return Some(Ok(inner.value))
