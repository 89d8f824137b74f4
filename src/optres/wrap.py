"""wrap() and wrap_async(): the boundary from raising code into Result.

These are the only places where an exception becomes an Err. Everything
else in optres returns errors as values.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from optres._config import get_config
from optres._logging import get_logger, logging_enabled
from optres.async_.promise import ResultPromise
from optres.result import Err, Ok, Result

__all__ = ['wrap', 'wrap_async']

logger = get_logger(__name__)


def _capture_types(
    exceptions: tuple[type[BaseException], ...] | None,
) -> tuple[type[BaseException], ...]:
    return exceptions if exceptions is not None else get_config().capture


def _log_captured(error: BaseException, boundary: str) -> None:
    if logging_enabled():
        logger.debug(
            'exception_captured',
            boundary=boundary,
            exc_type=type(error).__name__,
            exc_message=str(error),
        )


def wrap[T](
    f: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Call f and capture its outcome as a Result.

    Args:
        f: Zero-argument callable to run.
        exceptions: Exception types to capture. Defaults to the configured
            capture types, `(Exception,)` unless changed by `init()`.
            Anything else propagates.

    Returns:
        Ok(return value) or Err(raised exception).

    Examples:
        >>> wrap(lambda: 5)
        Ok(value=5)
        >>> wrap(lambda: 1 / 0)
        Err(error=ZeroDivisionError('division by zero'))
    """
    catch = _capture_types(exceptions)
    try:
        value = f()
    except catch as e:
        _log_captured(e, 'wrap')
        return Err(e)
    return Ok(value)


def wrap_async[T](
    f: Callable[[], Awaitable[T]] | Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> ResultPromise[T, BaseException]:
    """Await f (or f()) and capture its outcome as a Result.

    Args:
        f: Async callable, or an awaitable to await directly.
        exceptions: Exception types to capture, as for `wrap`.

    Returns:
        ResultPromise resolving to Ok(result) or Err(raised exception).

    Example:
        ```python
        async def example():
            result = await wrap_async(fetch_page).map(len)
        ```
    """

    async def _captured() -> Result[T, BaseException]:
        catch = _capture_types(exceptions)
        try:
            value = await (f() if callable(f) else f)
        except catch as e:
            _log_captured(e, 'wrap_async')
            return Err(e)
        return Ok(value)

    return ResultPromise.from_factory(_captured)
