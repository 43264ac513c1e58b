"""Tests for the generator combinators."""

from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.errors import InvalidArgument
from klaw_gen import (
    InvalidWeightsError,
    choose,
    elements,
    frequency,
    list_of,
    list_of_length,
    select_weighted,
    sequence_of,
)

from tests.strategies import weight_lists


class TestChoose:
    """Tests for choose()."""

    @given(choose(3, 7))
    def test_inclusive_range(self, value):
        """Both bounds can be produced and nothing outside them."""
        assert 3 <= value <= 7

    @given(choose(5, 5))
    def test_single_value(self, value):
        """A one-value range always yields that value."""
        assert value == 5


class TestElements:
    """Tests for elements()."""

    @given(elements('abc'))
    def test_draws_from_values(self, value):
        assert value in 'abc'

    @given(elements(x for x in (1, 2)))
    def test_accepts_iterators(self, value):
        assert value in (1, 2)


class TestLists:
    """Tests for list_of() and list_of_length()."""

    @given(list_of_length(st.integers(), 4))
    def test_fixed_length(self, values):
        assert len(values) == 4

    @given(list_of_length(st.integers(), 0))
    def test_zero_length(self, values):
        assert values == []

    def test_negative_length_raises(self):
        """Negative lengths are rejected before drawing."""
        with pytest.raises(InvalidArgument):
            list_of_length(st.integers(), -1)

    @given(list_of(st.booleans(), max_size=3))
    def test_variable_length(self, values):
        assert len(values) <= 3
        assert all(isinstance(v, bool) for v in values)


class TestSequenceOf:
    """Tests for sequence_of()."""

    @given(sequence_of([st.just(1), st.text(max_size=2), st.just(None)]))
    def test_one_value_per_strategy_in_order(self, values):
        assert len(values) == 3
        assert values[0] == 1
        assert isinstance(values[1], str)
        assert values[2] is None

    @given(sequence_of([]))
    def test_empty(self, values):
        assert values == []


class TestSelectWeighted:
    """Tests for select_weighted()."""

    def test_one_to_nine(self):
        """A 1:9 split gives the first alternative one slot in ten."""
        picks = Counter(select_weighted([1, 9], r) for r in range(10))
        assert picks == {0: 1, 1: 9}

    def test_zero_weight_never_selected(self):
        assert [select_weighted([0, 2, 0, 1], r) for r in range(3)] == [1, 1, 3]

    @given(weight_lists)
    def test_each_alternative_owns_its_weight(self, weights):
        """Exhausting [0, total) selects alternative i exactly weights[i] times."""
        picks = Counter(select_weighted(weights, r) for r in range(sum(weights)))
        assert all(picks[i] == w for i, w in enumerate(weights))

    @pytest.mark.parametrize('r', [-1, 10, 11])
    def test_out_of_range_raises(self, r):
        with pytest.raises(ValueError):
            select_weighted([1, 9], r)

    def test_empty_weights_raise(self):
        with pytest.raises(ValueError):
            select_weighted([], 0)


class TestFrequency:
    """Tests for frequency()."""

    @given(frequency((1, st.just('rare')), (9, st.just('common'))))
    def test_draws_from_alternatives(self, value):
        assert value in ('rare', 'common')

    @given(frequency((0, st.just('never')), (3, st.just('always'))))
    def test_zero_weight_alternative_skipped(self, value):
        assert value == 'always'

    @pytest.mark.parametrize(
        'pairs',
        [
            (),
            ((0, st.just(1)),),
            ((-1, st.just(1)), (2, st.just(2))),
            ((1.5, st.just(1)),),
            ((True, st.just(1)),),
        ],
    )
    def test_invalid_weights_raise(self, pairs):
        """Unusable weights are rejected at construction."""
        with pytest.raises(InvalidWeightsError):
            frequency(*pairs)

    def test_invalid_weights_is_invalid_argument(self):
        with pytest.raises(InvalidArgument):
            frequency()
