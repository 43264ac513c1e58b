"""Character-class and string generators.

Mixed-case and alphanumeric generators are weighted to look like ordinary
text: lower-case letters come up nine times as often as upper-case ones, and
letters nine times as often as digits.
"""

from __future__ import annotations

from hypothesis import strategies as st

from klaw_gen.combinators import choose, frequency, list_of

__all__ = [
    'alpha_char',
    'alpha_lower_char',
    'alpha_num_char',
    'alpha_str',
    'alpha_upper_char',
    'num_char',
    'num_str',
]


def _char_range(first: str, last: str) -> st.SearchStrategy[str]:
    return choose(ord(first), ord(last)).map(chr)


def num_char() -> st.SearchStrategy[str]:
    """Generate a digit, '0' to '9'."""
    return _char_range('0', '9')


def alpha_upper_char() -> st.SearchStrategy[str]:
    """Generate an upper-case letter, 'A' to 'Z'."""
    return _char_range('A', 'Z')


def alpha_lower_char() -> st.SearchStrategy[str]:
    """Generate a lower-case letter, 'a' to 'z'."""
    return _char_range('a', 'z')


def alpha_char() -> st.SearchStrategy[str]:
    """Generate a letter, lower-case nine times out of ten."""
    return frequency((1, alpha_upper_char()), (9, alpha_lower_char()))


def alpha_num_char() -> st.SearchStrategy[str]:
    """Generate a letter or digit, a letter nine times out of ten."""
    return frequency((1, num_char()), (9, alpha_char()))


def _all_letters(s: str) -> bool:
    return all(c.isalpha() for c in s)


def _all_digits(s: str) -> bool:
    return all(c.isdigit() for c in s)


def alpha_str() -> st.SearchStrategy[str]:
    """Generate a possibly empty string of letters."""
    return list_of(alpha_char()).map(''.join).filter(_all_letters)


def num_str() -> st.SearchStrategy[str]:
    """Generate a possibly empty string of digits."""
    return list_of(num_char()).map(''.join).filter(_all_digits)
