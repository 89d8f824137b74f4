"""Tests for ErrorAggregate."""

import pytest

from optres import ErrorAggregate, is_error_aggregate


class TestErrorAggregate:
    """Tests for construction, ordering and immutability."""

    def test_empty_aggregate_is_legal(self):
        agg = ErrorAggregate()
        assert agg.has_errors() is False
        assert len(agg) == 0
        assert agg.message == ''

    def test_members_keep_identity_and_order(self):
        a, b = ValueError('a'), KeyError('b')
        agg = ErrorAggregate(a, b)
        assert agg.errors == (a, b)
        assert agg.errors[0] is a
        assert list(agg) == [a, b]

    def test_message_is_newline_joined(self):
        agg = ErrorAggregate(ValueError('first'), RuntimeError('second'))
        assert agg.message == 'first\nsecond'
        assert str(agg) == 'first\nsecond'

    def test_append_returns_new_aggregate(self):
        a, b = ValueError('a'), ValueError('b')
        agg = ErrorAggregate(a)
        appended = agg.append(b)
        assert appended.errors == (a, b)
        assert agg.errors == (a,)

    def test_prepend(self):
        a, b, c = ValueError('a'), ValueError('b'), ValueError('c')
        assert ErrorAggregate(c).prepend(a, b).errors == (a, b, c)

    def test_merge_keeps_left_then_right(self):
        a, b = ValueError('a'), ValueError('b')
        merged = ErrorAggregate(a).merge(ErrorAggregate(b))
        assert merged.errors == (a, b)

    def test_never_deduplicates(self):
        a = ValueError('a')
        assert ErrorAggregate(a).append(a).errors == (a, a)

    def test_equality_by_members(self):
        a = ValueError('a')
        assert ErrorAggregate(a) == ErrorAggregate(a)
        assert ErrorAggregate(a) != ErrorAggregate(ValueError('a'))
        assert hash(ErrorAggregate(a)) == hash(ErrorAggregate(a))

    def test_is_raisable(self):
        with pytest.raises(ErrorAggregate, match='boom'):
            raise ErrorAggregate(ValueError('boom'))

    def test_is_error_aggregate(self):
        assert is_error_aggregate(ErrorAggregate())
        assert not is_error_aggregate(ValueError('x'))
