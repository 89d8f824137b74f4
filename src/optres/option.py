"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from optres.errors import OptionUnwrapError

if TYPE_CHECKING:
    from optres.async_.promise import OptionPromise
    from optres.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'is_option',
    'none',
    'option_from',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(1).xor(Some(2))
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def unwrap_or_none(self) -> T | None:
        """Return the contained Some value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate returns True, else Nothing.

        Only a literal True keeps the value; other truthy results do not.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value) is True:
            return self
        return Nothing

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting.

        Some(Some(v)) becomes Some(v) and Some(Nothing) becomes Nothing.
        A Some whose value is not an Option is returned unchanged.
        """
        if isinstance(self.value, Some | NothingType):
            return self.value
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Option[Any]) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def xor[U](self, other: Option[U]) -> Option[T]:
        """Return Some if exactly one of self and other is Some.

        Since this is Some, returns self when other is Nothing and
        Nothing when other is Some.
        """
        if isinstance(other, Some):
            return Nothing
        return self

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Option[Any]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def ok_or(self, _err: object) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from optres.result import Ok

        return Ok(self.value)

    def ok_or_else(self, _f: Callable[[], object]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from optres.result import Ok

        return Ok(self.value)

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> OptionPromise[U]:
        """Apply an async function to the contained value.

        Returns:
            OptionPromise resolving to Some(await f(value)).
        """
        from optres.async_.promise import OptionPromise

        async def _mapped() -> Option[U]:
            return Some(await f(self.value))

        return OptionPromise.from_factory(_mapped)

    def and_then_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> OptionPromise[U]:
        """Chain with an async function that returns an Option.

        Returns:
            OptionPromise resolving to the Option produced by f.
        """
        from optres.async_.promise import OptionPromise

        async def _chained() -> Option[U]:
            return await f(self.value)

        return OptionPromise.from_factory(_chained)

    def or_else_async(self, _f: Callable[[], Awaitable[Option[Any]]]) -> OptionPromise[T]:
        """Return an OptionPromise of self since this is Some."""
        from optres.async_.promise import OptionPromise

        return OptionPromise.from_option(self)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant (or `none()`) instead
    of instantiating directly. All instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            OptionUnwrapError: Always.
        """
        raise OptionUnwrapError

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            OptionUnwrapError: Always, with the custom message.
        """
        raise OptionUnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_or_none(self) -> None:
        """Return None since this is Nothing."""
        return None

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def zip(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def and_(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[U](self, other: Option[U]) -> Option[U]:
        """Return other since self is Nothing."""
        return other

    def xor[U](self, other: Option[U]) -> Option[U]:
        """Return other if it is Some, else Nothing."""
        if isinstance(other, Some):
            return other
        return self

    def and_then(self, _f: Callable[[Any], Option[Any]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[U](self, f: Callable[[], Option[U]]) -> Option[U]:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from optres.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error with f."""
        from optres.result import Err

        return Err(f())

    def map_async(self, _f: Callable[[Any], Awaitable[Any]]) -> OptionPromise[Any]:
        """Return an OptionPromise of Nothing."""
        from optres.async_.promise import OptionPromise

        return OptionPromise.from_option(self)

    def and_then_async(self, _f: Callable[[Any], Awaitable[Option[Any]]]) -> OptionPromise[Any]:
        """Return an OptionPromise of Nothing."""
        from optres.async_.promise import OptionPromise

        return OptionPromise.from_option(self)

    def or_else_async[U](self, f: Callable[[], Awaitable[Option[U]]]) -> OptionPromise[U]:
        """Recover with an async function since this is Nothing.

        f is called when the returned OptionPromise is awaited.
        """
        from optres.async_.promise import OptionPromise

        async def _recovered() -> Option[U]:
            return await f()

        return OptionPromise.from_factory(_recovered)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Construct a Some."""
    return Some(value)


def none() -> NothingType:
    """Return the shared Nothing instance."""
    return Nothing


def option_from[T](value: T | None) -> Option[T]:
    """Map a nullable value to an Option.

    Python None becomes Nothing; every other value, falsy ones included,
    becomes Some.

    Examples:
        >>> option_from(0)
        Some(value=0)
        >>> option_from(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True if value is a Some or Nothing."""
    return isinstance(value, Some | NothingType)
