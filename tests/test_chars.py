"""Tests for character-class and string generators."""

import string
from collections import Counter
from unittest.mock import patch

from hypothesis import HealthCheck, Phase, given, settings
from hypothesis import strategies as st
from klaw_gen import (
    alpha_char,
    alpha_lower_char,
    alpha_num_char,
    alpha_str,
    alpha_upper_char,
    list_of_length,
    num_char,
    num_str,
    select_weighted,
)


class TestCharClasses:
    """Tests for single-character generators."""

    @given(num_char())
    def test_num_char(self, c):
        assert c in string.digits

    @given(alpha_upper_char())
    def test_alpha_upper_char(self, c):
        assert c in string.ascii_uppercase

    @given(alpha_lower_char())
    def test_alpha_lower_char(self, c):
        assert c in string.ascii_lowercase

    @given(alpha_char())
    def test_alpha_char(self, c):
        assert c in string.ascii_letters

    @given(alpha_num_char())
    def test_alpha_num_char(self, c):
        assert c in string.ascii_letters + string.digits


class TestWeighting:
    """Tests for the lower:upper and letter:digit weighting."""

    def test_alpha_char_weights_lower_nine_to_one(self):
        """alpha_char asks frequency for 1 upper to 9 lower."""
        with patch('klaw_gen.chars.frequency') as frequency:
            alpha_char()
        (upper_weight, _), (lower_weight, _) = frequency.call_args.args
        assert (upper_weight, lower_weight) == (1, 9)

    def test_alpha_num_char_weights_letters_nine_to_one(self):
        """alpha_num_char asks frequency for 1 digit to 9 letters."""
        with patch('klaw_gen.chars.frequency') as frequency:
            alpha_num_char()
        (digit_weight, _), (letter_weight, _) = frequency.call_args.args
        assert (digit_weight, letter_weight) == (1, 9)

    def test_uniform_selector_yields_nine_lower_per_upper(self):
        """Across the whole selector range, lower case owns nine slots of ten."""
        picks = [select_weighted([1, 9], r) for r in range(10)]
        assert picks.count(0) == 1
        assert picks.count(1) == 9

    def test_alpha_char_mostly_lower_case_when_drawn(self):
        """Drawn through Hypothesis, lower case dominates.

        Hypothesis does not draw the selector uniformly (it favours zero, which
        selects upper case), so only a wide band around 0.9 is checked.
        """
        counts: Counter[bool] = Counter()

        @settings(
            max_examples=200,
            derandomize=True,
            database=None,
            deadline=None,
            phases=[Phase.generate],
            suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
        )
        @given(st.data())
        def collect(data):
            counts.update(c.islower() for c in data.draw(list_of_length(alpha_char(), 50)))

        collect()

        total = counts[True] + counts[False]
        assert total >= 5000
        assert counts[False] > 0
        assert 0.6 <= counts[True] / total <= 0.98


class TestStrings:
    """Tests for alpha_str() and num_str()."""

    @given(alpha_str())
    def test_alpha_str_only_letters(self, s):
        assert isinstance(s, str)
        assert all(c in string.ascii_letters for c in s)

    @given(num_str())
    def test_num_str_only_digits(self, s):
        assert isinstance(s, str)
        assert all(c in string.digits for c in s)

    def test_empty_strings_allowed(self):
        """The letter/digit filter accepts the empty string."""
        from klaw_gen.chars import _all_digits, _all_letters

        assert _all_letters('')
        assert _all_digits('')
        assert not _all_letters('ab1')
        assert not _all_digits('12a')
