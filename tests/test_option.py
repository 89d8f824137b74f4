"""Tests for Option type (Some and Nothing)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from optres import (
    Err,
    Nothing,
    NothingType,
    Ok,
    OptionUnwrapError,
    Some,
    is_option,
    none,
    option_from,
    some,
)
from tests.strategies import integers, options


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_constructor_function(self):
        """some() builds a Some."""
        assert some(42) == Some(42)

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        value = Some(None)
        assert value.value is None
        assert value != Nothing

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        value = Some(42)
        with pytest.raises(AttributeError):
            value.value = 100  # type: ignore[misc]


class TestNothingCreation:
    """Tests for the Nothing singleton."""

    def test_none_returns_singleton(self):
        """none() always returns the shared instance."""
        assert none() is Nothing
        assert none() is none()
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Equality is by variant only."""
        assert NothingType() == Nothing

    def test_some_not_equal_to_nothing(self):
        """Some is never equal to Nothing."""
        assert Some(42) != Nothing

    def test_hashable(self):
        """Options are hashable."""
        assert {Some(1): 'a', Nothing: 'b'}[Some(1)] == 'a'
        assert hash(Nothing) == hash(NothingType())


class TestOptionFrom:
    """Tests for option_from() and is_option()."""

    def test_none_is_absence(self):
        """Python None maps to Nothing."""
        assert option_from(None) is Nothing

    @pytest.mark.parametrize('value', [0, '', False, [], 42, 'text'])
    def test_other_values_are_present(self, value):
        """Falsy values are still present."""
        assert option_from(value) == Some(value)

    def test_is_option(self):
        """is_option() accepts only the two variants."""
        assert is_option(Some(1))
        assert is_option(Nothing)
        assert not is_option(Ok(1))
        assert not is_option(None)
        assert not is_option(1)


class TestOptionQuerying:
    """Tests for is_some() and is_none() methods."""

    def test_some_predicates(self):
        assert Some(42).is_some() is True
        assert Some(42).is_none() is False

    def test_nothing_predicates(self):
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True


class TestOptionUnwrap:
    """Tests for unwrap, expect, unwrap_or, unwrap_or_else, unwrap_or_none."""

    def test_some_unwrap(self):
        """Some.unwrap() returns the value."""
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        """Nothing.unwrap() raises OptionUnwrapError."""
        with pytest.raises(OptionUnwrapError, match='Cannot unwrap value of a None variant'):
            Nothing.unwrap()

    def test_unwrap_error_is_runtime_error(self):
        """OptionUnwrapError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            Nothing.unwrap()

    def test_some_expect(self):
        """Some.expect() returns the value."""
        assert Some(42).expect('should not fail') == 42

    def test_nothing_expect_raises(self):
        """Nothing.expect() raises with the custom message."""
        with pytest.raises(OptionUnwrapError, match='custom message'):
            Nothing.expect('custom message')

    def test_unwrap_or(self):
        assert Some(42).unwrap_or(0) == 42
        assert Nothing.unwrap_or(0) == 0

    def test_some_unwrap_or_else_does_not_call(self):
        """Some.unwrap_or_else() does not call the function."""
        called = False

        def factory():
            nonlocal called
            called = True
            return 0

        assert Some(42).unwrap_or_else(factory) == 42
        assert called is False

    def test_nothing_unwrap_or_else(self):
        """Nothing.unwrap_or_else() calls the function."""
        assert Nothing.unwrap_or_else(lambda: 7) == 7

    def test_unwrap_or_none(self):
        assert Some(42).unwrap_or_none() == 42
        assert Nothing.unwrap_or_none() is None


class TestOptionMap:
    """Tests for map and filter."""

    def test_some_map(self):
        """Some.map() transforms the value."""
        assert Some(5).map(lambda x: x * 2).map(str) == Some('10')

    def test_nothing_map_does_not_call(self):
        """Nothing.map() returns Nothing without calling f."""
        calls = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_filter_keeps_on_true(self):
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)

    def test_filter_drops_on_false(self):
        assert Some(3).filter(lambda x: x % 2 == 0) is Nothing

    def test_filter_requires_literal_true(self):
        """A truthy non-bool result does not keep the value."""
        assert Some(3).filter(lambda x: x) is Nothing  # type: ignore[arg-type,return-value]

    def test_nothing_filter(self):
        assert Nothing.filter(lambda x: True) is Nothing

    @given(integers)
    def test_functor_identity(self, value):
        """some(v).map(id) == some(v)."""
        assert Some(value).map(lambda x: x) == Some(value)

    @given(integers)
    def test_functor_composition(self, value):
        """map(f).map(g) == map(g . f)."""

        def f(x):
            return x + 1

        def g(x):
            return x * 3

        assert Some(value).map(f).map(g) == Some(value).map(lambda x: g(f(x)))


class TestOptionZipFlatten:
    """Tests for zip and flatten."""

    def test_zip_both_some(self):
        assert Some(1).zip(Some('a')) == Some((1, 'a'))

    def test_zip_with_nothing(self):
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some(1)) is Nothing
        assert Nothing.zip(Nothing) is Nothing

    def test_flatten_nested_some(self):
        assert Some(Some(5)).flatten() == Some(5)

    def test_flatten_some_nothing(self):
        assert Some(Nothing).flatten() is Nothing

    def test_flatten_plain_value_is_unchanged(self):
        assert Some(5).flatten() == Some(5)

    def test_flatten_removes_one_level_only(self):
        assert Some(Some(Some(1))).flatten() == Some(Some(1))

    def test_flatten_nothing(self):
        assert Nothing.flatten() is Nothing


class TestOptionBooleanOps:
    """Truth table for and_, or_, xor."""

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Some(1), Some(2), Some(2)),
            (Some(1), Nothing, Nothing),
            (Nothing, Some(2), Nothing),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_and(self, left, right, expected):
        assert left.and_(right) == expected

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Some(1), Some(2), Some(1)),
            (Some(1), Nothing, Some(1)),
            (Nothing, Some(2), Some(2)),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_or(self, left, right, expected):
        assert left.or_(right) == expected

    @pytest.mark.parametrize(
        ('left', 'right', 'expected'),
        [
            (Some(1), Some(2), Nothing),
            (Some(1), Nothing, Some(1)),
            (Nothing, Some(2), Some(2)),
            (Nothing, Nothing, Nothing),
        ],
    )
    def test_xor(self, left, right, expected):
        assert left.xor(right) == expected

    @given(options, options)
    def test_xor_is_some_iff_exactly_one_some(self, left, right):
        assert left.xor(right).is_some() == (left.is_some() != right.is_some())


class TestOptionAndThen:
    """Tests for and_then and or_else."""

    def test_some_and_then(self):
        assert Some(5).and_then(lambda x: Some(x * 2)) == Some(10)
        assert Some(5).and_then(lambda x: Nothing) is Nothing

    def test_nothing_and_then(self):
        assert Nothing.and_then(lambda x: Some(x)) is Nothing

    def test_some_or_else_does_not_call(self):
        calls = []
        assert Some(1).or_else(lambda: calls.append(1) or Some(0)) == Some(1)
        assert calls == []

    def test_nothing_or_else(self):
        assert Nothing.or_else(lambda: Some(0)) == Some(0)

    @given(integers)
    def test_left_identity(self, value):
        """some(v).and_then(f) == f(v)."""

        def f(x):
            return Some(x * 2) if x % 2 else Nothing

        assert Some(value).and_then(f) == f(value)

    @given(options)
    def test_right_identity(self, option):
        """option.and_then(some) == option."""
        assert option.and_then(Some) == option


class TestOptionToResult:
    """Tests for ok_or and ok_or_else."""

    def test_some_ok_or(self):
        assert Some(1).ok_or('missing') == Ok(1)

    def test_nothing_ok_or(self):
        assert Nothing.ok_or('missing') == Err('missing')

    def test_some_ok_or_else_does_not_call(self):
        calls = []
        assert Some(1).ok_or_else(lambda: calls.append(1)) == Ok(1)
        assert calls == []

    def test_nothing_ok_or_else(self):
        error = KeyError('k')
        assert Nothing.ok_or_else(lambda: error) == Err(error)

    @given(st.one_of(st.none(), integers))
    def test_option_from_round_trip(self, value):
        assert option_from(value).unwrap_or_none() == value
