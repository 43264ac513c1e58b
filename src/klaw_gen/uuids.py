"""Version 4 (random) UUID generator.

See RFC 4122 section 4.4: the version nibble (hex digit 12 of the 32-digit
form) is ``4`` and the variant nibble (hex digit 16) is one of ``8 9 a b``.
"""

from __future__ import annotations

import uuid

from hypothesis import strategies as st

from klaw_gen.combinators import choose, elements

__all__ = [
    'VARIANT_DIGITS',
    'uuid_from_bits',
    'uuid_v4',
]

VARIANT_DIGITS = ('8', '9', 'a', 'b')

# Largest signed 32-bit integer; each 64-bit half is built from two such draws.
_WORD_MAX = 2**31 - 1


def uuid_from_bits(high: int, low: int, variant: str) -> uuid.UUID:
    """Build a version 4 UUID from two 64-bit halves and a variant digit.

    Args:
        high: Most significant 64 bits.
        low: Least significant 64 bits.
        variant: Hex digit for the variant nibble, one of ``VARIANT_DIGITS``.

    Returns:
        The UUID with its version and variant nibbles overwritten.

    Raises:
        ValueError: If a half is outside ``[0, 2**64)`` or ``variant`` is not
            a valid variant digit.

    Example:
        ```python
        uuid_from_bits(0, 0, 'a')
        # UUID('00000000-0000-4000-a000-000000000000')
        ```
    """
    if variant.lower() not in VARIANT_DIGITS:
        msg = f'variant must be one of {VARIANT_DIGITS}, got {variant!r}'
        raise ValueError(msg)
    for half in (high, low):
        if not 0 <= half < 2**64:
            msg = f'{half} does not fit in 64 bits'
            raise ValueError(msg)

    digits = list(f'{high:016X}{low:016X}')
    digits[12] = '4'
    digits[16] = variant
    return uuid.UUID(''.join(digits))


@st.composite
def uuid_v4(draw: st.DrawFn) -> uuid.UUID:
    """Generate version 4 UUIDs.

    The version digit is always ``4`` and the variant digit one of
    ``8``, ``9``, ``a``, ``b``. The remaining bits are not uniform:
    Hypothesis draws from a wide integer range favour small values and
    shrink towards zero, so many generated UUIDs are mostly zeros and a
    failing example minimises to ``00000000-0000-4000-8000-000000000000``.
    Use ``st.uuids(version=4)`` when uniform random bits matter.
    """
    high = (draw(choose(0, _WORD_MAX)) << 32) + draw(choose(0, _WORD_MAX))
    low = (draw(choose(0, _WORD_MAX)) << 32) + draw(choose(0, _WORD_MAX))
    variant = draw(elements(VARIANT_DIGITS))
    return uuid_from_bits(high, low, variant)
