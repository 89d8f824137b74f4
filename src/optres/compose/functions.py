"""Free-function forms of the combinators.

Each function accepts either a value (Option/Result) or its deferred
wrapper (OptionPromise/ResultPromise) and delegates to the method of the
same name, so a pipeline can be written without caring whether a step has
gone asynchronous.

Example:
    ```python
    from optres.compose import option_map, option_and_then

    parsed = option_and_then(option_map(some(' 42 '), str.strip), parse_int)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from optres.async_.promise import OptionPromise, ResultPromise
from optres.option import Option
from optres.result import Result

__all__ = [
    'option_and_then',
    'option_and_then_async',
    'option_map',
    'option_map_async',
    'option_or_else',
    'option_or_else_async',
    'result_and_then',
    'result_and_then_async',
    'result_map',
    'result_map_async',
    'result_map_err',
    'result_or_else',
    'result_or_else_async',
]


# --- Option ---


@overload
def option_map[T, U](o: OptionPromise[T], f: Callable[[T], U]) -> OptionPromise[U]: ...
@overload
def option_map[T, U](o: Option[T], f: Callable[[T], U]) -> Option[U]: ...
def option_map(o: Any, f: Callable[[Any], Any]) -> Any:
    """Map the Some value, leaving Nothing unchanged."""
    return o.map(f)


def option_map_async[T, U](o: Option[T] | OptionPromise[T], f: Callable[[T], Awaitable[U]]) -> OptionPromise[U]:
    """Map the Some value with an async function."""
    return o.map_async(f)


@overload
def option_and_then[T, U](o: OptionPromise[T], f: Callable[[T], Option[U]]) -> OptionPromise[U]: ...
@overload
def option_and_then[T, U](o: Option[T], f: Callable[[T], Option[U]]) -> Option[U]: ...
def option_and_then(o: Any, f: Callable[[Any], Any]) -> Any:
    """Return Nothing for Nothing, otherwise f(value). Also known as flatmap."""
    return o.and_then(f)


def option_and_then_async[T, U](
    o: Option[T] | OptionPromise[T], f: Callable[[T], Awaitable[Option[U]]]
) -> OptionPromise[U]:
    """Flatmap with an async function."""
    return o.and_then_async(f)


@overload
def option_or_else[T, U](o: OptionPromise[T], f: Callable[[], Option[U]]) -> OptionPromise[T | U]: ...
@overload
def option_or_else[T, U](o: Option[T], f: Callable[[], Option[U]]) -> Option[T | U]: ...
def option_or_else(o: Any, f: Callable[[], Any]) -> Any:
    """Return the option if Some, otherwise f()."""
    return o.or_else(f)


def option_or_else_async[T, U](
    o: Option[T] | OptionPromise[T], f: Callable[[], Awaitable[Option[U]]]
) -> OptionPromise[T | U]:
    """Return the option if Some, otherwise await f()."""
    return o.or_else_async(f)


# --- Result ---


@overload
def result_map[T, E, U](r: ResultPromise[T, E], f: Callable[[T], U]) -> ResultPromise[U, E]: ...
@overload
def result_map[T, E, U](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]: ...
def result_map(r: Any, f: Callable[[Any], Any]) -> Any:
    """Map the Ok value, leaving Err unchanged."""
    return r.map(f)


def result_map_async[T, E, U](
    r: Result[T, E] | ResultPromise[T, E], f: Callable[[T], Awaitable[U]]
) -> ResultPromise[U, E]:
    """Map the Ok value with an async function."""
    return r.map_async(f)


@overload
def result_map_err[T, E, F](r: ResultPromise[T, E], f: Callable[[E], F]) -> ResultPromise[T, F]: ...
@overload
def result_map_err[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]: ...
def result_map_err(r: Any, f: Callable[[Any], Any]) -> Any:
    """Map the Err value, leaving Ok unchanged."""
    return r.map_err(f)


@overload
def result_and_then[T, E, U, F](r: ResultPromise[T, E], f: Callable[[T], Result[U, F]]) -> ResultPromise[U, E | F]: ...
@overload
def result_and_then[T, E, U, F](r: Result[T, E], f: Callable[[T], Result[U, F]]) -> Result[U, E | F]: ...
def result_and_then(r: Any, f: Callable[[Any], Any]) -> Any:
    """Call f with the Ok value, otherwise return the Err."""
    return r.and_then(f)


def result_and_then_async[T, E, U, F](
    r: Result[T, E] | ResultPromise[T, E], f: Callable[[T], Awaitable[Result[U, F]]]
) -> ResultPromise[U, E | F]:
    """Call async f with the Ok value, otherwise return the Err."""
    return r.and_then_async(f)


@overload
def result_or_else[T, E, U, F](r: ResultPromise[T, E], f: Callable[[E], Result[U, F]]) -> ResultPromise[T | U, F]: ...
@overload
def result_or_else[T, E, U, F](r: Result[T, E], f: Callable[[E], Result[U, F]]) -> Result[T | U, F]: ...
def result_or_else(r: Any, f: Callable[[Any], Any]) -> Any:
    """Call f with the Err value, otherwise return the Ok."""
    return r.or_else(f)


def result_or_else_async[T, E, U, F](
    r: Result[T, E] | ResultPromise[T, E], f: Callable[[E], Awaitable[Result[U, F]]]
) -> ResultPromise[T | U, F]:
    """Call async f with the Err value, otherwise return the Ok."""
    return r.or_else_async(f)
