"""OptionPromise and ResultPromise: combinators over pending computations.

A promise wraps an Awaitable[Option[T]] or Awaitable[Result[T, E]] and
exposes the same combinators as the synchronous types. Each combinator
returns a new promise whose coroutine awaits the previous one and then
applies the synchronous combinator, so a chain runs strictly in the order
it was written and only when awaited.

A promise resolves at most once. Its source runs on the first await and
the outcome is kept, so the same promise can be awaited again or used as
the start of several chains; concurrent awaiters wait for the first one.

If the underlying awaitable or an async callback raises, the exception
propagates out of the awaited chain, and out of every later await of the
same promise. No combinator turns it into an Err; use `wrap_async` for
that.

Example:
    ```python
    async def find_user(id: int) -> Option[User]:
        ...

    name = await (
        OptionPromise(find_user(1))
        .map(lambda user: user.name)
        .filter(str.isidentifier)
        .unwrap_or('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any, Self, TypeIs

import anyio

from optres.errors import ErrorAggregate
from optres.option import Nothing, Option, Some
from optres.result import CombinedResult, Err, Ok, Result

__all__ = [
    'OptionPromise',
    'ResultPromise',
    'is_option_promise',
    'is_result_promise',
]


async def _resolve[V](value: V | Awaitable[V]) -> V:
    """Await promise operands; return plain values unchanged."""
    if isinstance(value, OptionPromise | ResultPromise):
        return await value
    return value  # type: ignore[return-value]


class _Shared[R]:
    """Resolution state of one promise, shared by everything awaiting it."""

    __slots__ = ('done', 'error', 'source', 'value')

    def __init__(self, source: Callable[[], Awaitable[R]]) -> None:
        self.source: Callable[[], Awaitable[R]] | None = source
        self.done: anyio.Event | None = None
        self.value: R | None = None
        self.error: BaseException | None = None

    async def get(self) -> R:
        """Run the source on first call; later calls see the same outcome."""
        if self.done is None:
            self.done = anyio.Event()
            source, self.source = self.source, None
            assert source is not None
            try:
                self.value = await source()
            except BaseException as e:
                self.error = e
                raise
            finally:
                self.done.set()
            return self.value  # type: ignore[return-value]

        await self.done.wait()
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.done is None or not self.done.is_set():
            return '<pending>'
        if self.error is not None:
            return f'<raised {self.error!r}>'
        return repr(self.value)


class OptionPromise[T]:
    """Deferred Option: an awaitable producing Option[T].

    Example:
        ```python
        async def example():
            base = OptionPromise.from_some(5)
            assert await base.map(lambda x: x * 2) == Some(10)
            assert await base.filter(lambda x: x > 9) is Nothing
        ```
    """

    __slots__ = ('_shared',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        """Create an OptionPromise from an awaitable.

        Args:
            awaitable: An awaitable that produces an Option[T]. It is
                awaited at most once, on the first await of the promise.
        """
        self._shared: _Shared[Option[T]] = _Shared(lambda: awaitable)

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self._shared.get().__await__()

    @classmethod
    def from_factory(cls, factory: Callable[[], Awaitable[Option[T]]]) -> Self:
        """Create an OptionPromise that calls factory on its first await.

        Nothing is created until then, so an OptionPromise that is never
        awaited leaves no coroutine behind.
        """
        promise = cls.__new__(cls)
        promise._shared = _Shared(factory)
        return promise

    @classmethod
    def from_option(cls, option: Option[T]) -> OptionPromise[T]:
        """Create an OptionPromise resolving to an existing Option."""

        async def _option() -> Option[T]:
            return option

        return cls.from_factory(_option)

    @classmethod
    def from_some(cls, value: T) -> OptionPromise[T]:
        """Create an OptionPromise resolving to Some(value)."""
        return cls.from_option(Some(value))

    @classmethod
    def from_nothing(cls) -> OptionPromise[T]:
        """Create an OptionPromise resolving to Nothing."""
        return cls.from_option(Nothing)

    def _then[U](self, f: Callable[[Option[T]], Option[U]]) -> OptionPromise[U]:
        async def _chained() -> Option[U]:
            return f(await self._shared.get())

        return OptionPromise.from_factory(_chained)

    def _then_async[U](self, f: Callable[[Option[T]], Awaitable[Option[U]]]) -> OptionPromise[U]:
        async def _chained() -> Option[U]:
            return await f(await self._shared.get())

        return OptionPromise.from_factory(_chained)

    # --- Combinators ---

    def map[U](self, f: Callable[[T], U]) -> OptionPromise[U]:
        """Apply a sync function to the Some value."""
        return self._then(lambda option: option.map(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> OptionPromise[U]:
        """Apply an async function to the Some value."""
        return self._then_async(lambda option: option.map_async(f))

    def filter(self, predicate: Callable[[T], bool]) -> OptionPromise[T]:
        """Keep the Some value only if predicate returns True."""
        return self._then(lambda option: option.filter(predicate))

    def zip[U](self, other: Option[U] | OptionPromise[U]) -> OptionPromise[tuple[T, U]]:
        """Pair with another Option; a promise operand is awaited after self."""

        async def _zipped() -> Option[tuple[T, U]]:
            option = await self._shared.get()
            return option.zip(await _resolve(other))

        return OptionPromise.from_factory(_zipped)

    def flatten(self) -> OptionPromise[Any]:
        """Remove one level of Option nesting."""
        return self._then(lambda option: option.flatten())

    def and_[U](self, other: Option[U] | OptionPromise[U]) -> OptionPromise[U]:
        """Resolve to other if self is Some, else Nothing."""

        async def _and() -> Option[U]:
            option = await self._shared.get()
            return option.and_(await _resolve(other))

        return OptionPromise.from_factory(_and)

    def or_[U](self, other: Option[U] | OptionPromise[U]) -> OptionPromise[T | U]:
        """Resolve to self if Some, else to other."""

        async def _or() -> Option[T | U]:
            option = await self._shared.get()
            return option.or_(await _resolve(other))

        return OptionPromise.from_factory(_or)

    def xor[U](self, other: Option[U] | OptionPromise[U]) -> OptionPromise[T | U]:
        """Resolve to the single Some among self and other, else Nothing."""

        async def _xor() -> Option[T | U]:
            option = await self._shared.get()
            return option.xor(await _resolve(other))

        return OptionPromise.from_factory(_xor)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> OptionPromise[U]:
        """Chain with a sync function that returns an Option."""
        return self._then(lambda option: option.and_then(f))

    def and_then_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> OptionPromise[U]:
        """Chain with an async function that returns an Option."""
        return self._then_async(lambda option: option.and_then_async(f))

    def or_else[U](self, f: Callable[[], Option[U]]) -> OptionPromise[T | U]:
        """Recover from Nothing with a sync function."""
        return self._then(lambda option: option.or_else(f))

    def or_else_async[U](self, f: Callable[[], Awaitable[Option[U]]]) -> OptionPromise[T | U]:
        """Recover from Nothing with an async function."""
        return self._then_async(lambda option: option.or_else_async(f))

    def ok_or[E](self, error: E) -> ResultPromise[T, E]:
        """Convert to a ResultPromise, using error for Nothing."""

        async def _converted() -> Result[T, E]:
            return (await self._shared.get()).ok_or(error)

        return ResultPromise.from_factory(_converted)

    def ok_or_else[E](self, f: Callable[[], E]) -> ResultPromise[T, E]:
        """Convert to a ResultPromise, computing the error for Nothing."""

        async def _converted() -> Result[T, E]:
            return (await self._shared.get()).ok_or_else(f)

        return ResultPromise.from_factory(_converted)

    # --- Extraction ---

    def is_some(self) -> Coroutine[Any, Any, bool]:
        """Coroutine producing True if the Option is Some."""

        async def _check() -> bool:
            return (await self._shared.get()).is_some()

        return _check()

    def is_none(self) -> Coroutine[Any, Any, bool]:
        """Coroutine producing True if the Option is Nothing."""

        async def _check() -> bool:
            return (await self._shared.get()).is_none()

        return _check()

    def unwrap(self) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Some value, raising OptionUnwrapError on Nothing."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap()

        return _unwrap()

    def expect(self, msg: str) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Some value, raising with msg on Nothing."""

        async def _expect() -> T:
            return (await self._shared.get()).expect(msg)

        return _expect()

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Some value or the default."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap_or(default)

        return _unwrap()

    def unwrap_or_else(self, f: Callable[[], T]) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Some value or f()."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap_or_else(f)

        return _unwrap()

    def unwrap_or_none(self) -> Coroutine[Any, Any, T | None]:
        """Coroutine producing the Some value or None."""

        async def _unwrap() -> T | None:
            return (await self._shared.get()).unwrap_or_none()

        return _unwrap()

    def __repr__(self) -> str:
        return f'OptionPromise({self._shared!r})'


class ResultPromise[T, E]:
    """Deferred Result: an awaitable producing Result[T, E].

    Resolves at most once, like OptionPromise.

    Example:
        ```python
        def validate(x: int) -> Result[int, ValueError]:
            return Ok(x) if x > 0 else Err(ValueError('not positive'))

        async def example():
            result = await ResultPromise.from_ok(5).and_then(validate)
            assert result == Ok(5)
        ```
    """

    __slots__ = ('_shared',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create a ResultPromise from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E]. It is
                awaited at most once, on the first await of the promise.
        """
        self._shared: _Shared[Result[T, E]] = _Shared(lambda: awaitable)

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._shared.get().__await__()

    @classmethod
    def from_factory(cls, factory: Callable[[], Awaitable[Result[T, E]]]) -> Self:
        """Create a ResultPromise that calls factory on its first await."""
        promise = cls.__new__(cls)
        promise._shared = _Shared(factory)
        return promise

    @classmethod
    def from_result(cls, result: Result[T, E]) -> ResultPromise[T, E]:
        """Create a ResultPromise resolving to an existing Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls.from_factory(_result)

    @classmethod
    def from_ok(cls, value: T) -> ResultPromise[T, E]:
        """Create a ResultPromise resolving to Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> ResultPromise[T, E]:
        """Create a ResultPromise resolving to Err(error)."""
        return cls.from_result(Err(error))

    def _then[U, F](self, f: Callable[[Result[T, E]], Result[U, F]]) -> ResultPromise[U, F]:
        async def _chained() -> Result[U, F]:
            return f(await self._shared.get())

        return ResultPromise.from_factory(_chained)

    def _then_async[U, F](self, f: Callable[[Result[T, E]], Awaitable[Result[U, F]]]) -> ResultPromise[U, F]:
        async def _chained() -> Result[U, F]:
            return await f(await self._shared.get())

        return ResultPromise.from_factory(_chained)

    def _then_option[U](self, f: Callable[[Result[T, E]], Option[U]]) -> OptionPromise[U]:
        async def _converted() -> Option[U]:
            return f(await self._shared.get())

        return OptionPromise.from_factory(_converted)

    # --- Combinators ---

    def map[U](self, f: Callable[[T], U]) -> ResultPromise[U, E]:
        """Apply a sync function to the Ok value."""
        return self._then(lambda result: result.map(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> ResultPromise[U, E]:
        """Apply an async function to the Ok value."""
        return self._then_async(lambda result: result.map_async(f))

    def map_err[F](self, f: Callable[[E], F]) -> ResultPromise[T, F]:
        """Apply a sync function to the Err value."""
        return self._then(lambda result: result.map_err(f))

    def map_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> ResultPromise[T, F]:
        """Apply an async function to the Err value."""
        return self._then_async(lambda result: result.map_err_async(f))

    def and_[U](self, other: Result[U, E] | ResultPromise[U, E]) -> ResultPromise[U, E]:
        """Resolve to other if self is Ok, else to self's Err."""

        async def _and() -> Result[U, E]:
            result = await self._shared.get()
            return result.and_(await _resolve(other))

        return ResultPromise.from_factory(_and)

    def or_[F](self, other: Result[T, F] | ResultPromise[T, F]) -> ResultPromise[T, F]:
        """Resolve to self if Ok, else to other."""

        async def _or() -> Result[T, F]:
            result = await self._shared.get()
            return result.or_(await _resolve(other))

        return ResultPromise.from_factory(_or)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> ResultPromise[U, E]:
        """Chain with a sync function that returns a Result."""
        return self._then(lambda result: result.and_then(f))

    def and_then_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> ResultPromise[U, E]:
        """Chain with an async function that returns a Result."""
        return self._then_async(lambda result: result.and_then_async(f))

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> ResultPromise[T, F]:
        """Recover from an Err with a sync function."""
        return self._then(lambda result: result.or_else(f))

    def or_else_async[F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> ResultPromise[T, F]:
        """Recover from an Err with an async function."""
        return self._then_async(lambda result: result.or_else_async(f))

    def zip[U](self, other: Result[U, E] | ResultPromise[U, E]) -> ResultPromise[tuple[T, U], E]:
        """Pair with another Result; a promise operand is awaited after self."""

        async def _zipped() -> Result[tuple[T, U], E]:
            result = await self._shared.get()
            return result.zip(await _resolve(other))

        return ResultPromise.from_factory(_zipped)

    def and_try(self, other: Result[Any, Any] | ResultPromise[Any, Any]) -> ResultPromise[CombinedResult, ErrorAggregate]:
        """Combine with another Result, collecting every error."""

        async def _combined() -> Result[CombinedResult, ErrorAggregate]:
            result = await self._shared.get()
            return result.and_try(await _resolve(other))

        return ResultPromise.from_factory(_combined)

    def ok(self) -> OptionPromise[T]:
        """Convert to an OptionPromise of the Ok value."""
        return self._then_option(lambda result: result.ok())

    def err(self) -> OptionPromise[E]:
        """Convert to an OptionPromise of the Err value."""
        return self._then_option(lambda result: result.err())

    # --- Extraction ---

    def is_ok(self) -> Coroutine[Any, Any, bool]:
        """Coroutine producing True if the Result is Ok."""

        async def _check() -> bool:
            return (await self._shared.get()).is_ok()

        return _check()

    def is_err(self) -> Coroutine[Any, Any, bool]:
        """Coroutine producing True if the Result is Err."""

        async def _check() -> bool:
            return (await self._shared.get()).is_err()

        return _check()

    def unwrap(self) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value, raising the error on Err."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap()

        return _unwrap()

    def expect(self, msg: str) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value, raising with msg on Err."""

        async def _expect() -> T:
            return (await self._shared.get()).expect(msg)

        return _expect()

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or the default."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap_or(default)

        return _unwrap()

    def unwrap_or_else(self, f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or f(error)."""

        async def _unwrap() -> T:
            return (await self._shared.get()).unwrap_or_else(f)

        return _unwrap()

    def __repr__(self) -> str:
        return f'ResultPromise({self._shared!r})'


def is_option_promise(value: object) -> TypeIs[OptionPromise[Any]]:
    """Return True if value is an OptionPromise."""
    return isinstance(value, OptionPromise)


def is_result_promise(value: object) -> TypeIs[ResultPromise[Any, Any]]:
    """Return True if value is a ResultPromise."""
    return isinstance(value, ResultPromise)
