"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from optres.errors import ErrorAggregate, ResultUnwrapError

if TYPE_CHECKING:
    from optres.async_.promise import ResultPromise
    from optres.option import NothingType, Some

__all__ = [
    'CombinedResult',
    'Err',
    'Ok',
    'Result',
    'err',
    'is_result',
    'ok',
]


class CombinedResult(msgspec.Struct, frozen=True, gc=False):
    """Success payload of `and_try`: the values of every combined Ok, in order.

    Combining never nests: a CombinedResult on either side contributes its
    values rather than itself.

    Examples:
        >>> CombinedResult.combine(1, 2)
        CombinedResult(values=(1, 2))
        >>> CombinedResult.combine(CombinedResult((1, 2)), 3)
        CombinedResult(values=(1, 2, 3))
    """

    values: tuple[Any, ...]

    @classmethod
    def combine(cls, left: object, right: object) -> CombinedResult:
        """Concatenate two values, splicing in existing CombinedResults."""
        lhs = left.values if isinstance(left, CombinedResult) else (left,)
        rhs = right.values if isinstance(right, CombinedResult) else (right,)
        return cls((*lhs, *rhs))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def _aggregate(*errors: object) -> ErrorAggregate:
    """Collect errors into one aggregate, merging aggregates instead of nesting them."""
    acc = ErrorAggregate()
    for error in errors:
        acc = acc.merge(error) if isinstance(error, ErrorAggregate) else acc.append(error)
    return acc


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from optres.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from optres.option import Nothing

        return Nothing

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def or_(self, _other: Result[Any, Any]) -> Ok[T]:
        """Return self if Ok, else return other.

        Since this is Ok, returns self.
        """
        return self

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[Any], Result[Any, Any]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def zip[U, E](self, other: Result[U, E]) -> Result[tuple[T, U], E]:
        """Combine two Ok values into a tuple.

        If both are Ok, returns Ok((self.value, other.value)).
        If other is Err, returns it.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def and_try(self, other: Result[Any, Any]) -> Result[CombinedResult, ErrorAggregate]:
        """Combine with another Result, collecting every error.

        Both Ok gives Ok(CombinedResult) of both values. An Err on the
        other side gives Err(ErrorAggregate) of its error(s).

        Examples:
            >>> Ok(1).and_try(Ok(2)).and_try(Ok(3))
            Ok(value=CombinedResult(values=(1, 2, 3)))
        """
        if isinstance(other, Ok):
            return Ok(CombinedResult.combine(self.value, other.value))
        return Err(_aggregate(other.error))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> ResultPromise[U, Any]:
        """Apply an async function to the Ok value.

        Returns:
            ResultPromise resolving to Ok(await f(value)).
        """
        from optres.async_.promise import ResultPromise

        async def _mapped() -> Result[U, Any]:
            return Ok(await f(self.value))

        return ResultPromise.from_factory(_mapped)

    def map_err_async(self, _f: Callable[[Any], Awaitable[Any]]) -> ResultPromise[T, Any]:
        """Return a ResultPromise of self since this is Ok."""
        from optres.async_.promise import ResultPromise

        return ResultPromise.from_result(self)

    def and_then_async[U, E](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> ResultPromise[U, E]:
        """Chain with an async function that returns a Result.

        Returns:
            ResultPromise resolving to the Result produced by f.
        """
        from optres.async_.promise import ResultPromise

        async def _chained() -> Result[U, E]:
            return await f(self.value)

        return ResultPromise.from_factory(_chained)

    def or_else_async(self, _f: Callable[[Any], Awaitable[Result[Any, Any]]]) -> ResultPromise[T, Any]:
        """Return a ResultPromise of self since this is Ok."""
        from optres.async_.promise import ResultPromise

        return ResultPromise.from_result(self)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err(ValueError('something went wrong'))
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Exceptions are raised as-is. Any other payload is wrapped.

        Raises:
            E: The contained error, when it is an exception.
            ResultUnwrapError: When the payload is not an exception.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ResultUnwrapError(f'Called unwrap on Err: {self.error!r}', self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            ResultUnwrapError: Always, chained from the contained error.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ResultUnwrapError(f'{msg}: {self.error!r}', self.error) from cause

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from optres.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from optres.option import Some

        return Some(self.error)

    def and_(self, _other: Result[Any, Any]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Err.

        When both are Err the second error wins.
        """
        return other

    def and_then(self, _f: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def zip(self, _other: Result[Any, Any]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_try(self, other: Result[Any, Any]) -> Err[ErrorAggregate]:
        """Combine with another Result, collecting every error.

        Always Err: the aggregate holds this error followed by the other
        error when the other side is Err too.
        """
        if isinstance(other, Err):
            return Err(_aggregate(self.error, other.error))
        return Err(_aggregate(self.error))

    def map_async(self, _f: Callable[[Any], Awaitable[Any]]) -> ResultPromise[Any, E]:
        """Return a ResultPromise of self since this is Err."""
        from optres.async_.promise import ResultPromise

        return ResultPromise.from_result(self)

    def map_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> ResultPromise[Any, F]:
        """Apply an async function to the contained error.

        Returns:
            ResultPromise resolving to Err(await f(error)).
        """
        from optres.async_.promise import ResultPromise

        async def _mapped() -> Result[Any, F]:
            return Err(await f(self.error))

        return ResultPromise.from_factory(_mapped)

    def and_then_async(self, _f: Callable[[Any], Awaitable[Result[Any, Any]]]) -> ResultPromise[Any, E]:
        """Return a ResultPromise of self since this is Err."""
        from optres.async_.promise import ResultPromise

        return ResultPromise.from_result(self)

    def or_else_async[T, F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> ResultPromise[T, F]:
        """Recover from the error with an async function.

        Returns:
            ResultPromise resolving to the Result produced by f.
        """
        from optres.async_.promise import ResultPromise

        async def _recovered() -> Result[T, F]:
            return await f(self.error)

        return ResultPromise.from_factory(_recovered)


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Construct an Ok."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Construct an Err."""
    return Err(error)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if value is an Ok or Err."""
    return isinstance(value, Ok | Err)
