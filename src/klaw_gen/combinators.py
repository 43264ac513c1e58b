"""Generator-combinator names over Hypothesis strategies.

These are thin wrappers that give Hypothesis primitives the vocabulary the rest
of klaw-gen is written in: inclusive ranges, fixed-length lists, sequencing and
weighted choice.

Example:
    ```python
    from klaw_gen.combinators import choose, frequency, list_of_length

    dice = choose(1, 6)
    three_rolls = list_of_length(dice, 3)
    mostly_small = frequency((9, choose(0, 9)), (1, choose(10, 1000)))
    ```
"""

from __future__ import annotations

from bisect import bisect_right
from functools import partial
from itertools import accumulate
from typing import TYPE_CHECKING

from hypothesis import strategies as st
from hypothesis.errors import InvalidArgument

from klaw_gen._logging import get_logger
from klaw_gen.errors import InvalidWeightsError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = [
    'choose',
    'elements',
    'frequency',
    'list_of',
    'list_of_length',
    'select_weighted',
    'sequence_of',
]

logger = get_logger(__name__)


def choose(low: int, high: int) -> st.SearchStrategy[int]:
    """Generate integers uniformly from the inclusive range [low, high]."""
    return st.integers(min_value=low, max_value=high)


def elements[T](values: Iterable[T]) -> st.SearchStrategy[T]:
    """Generate one of a fixed collection of values."""
    return st.sampled_from(tuple(values))


def list_of[T](strategy: st.SearchStrategy[T], max_size: int | None = None) -> st.SearchStrategy[list[T]]:
    """Generate variable-length lists of values drawn from ``strategy``."""
    return st.lists(strategy, max_size=max_size)


def list_of_length[T](strategy: st.SearchStrategy[T], length: int) -> st.SearchStrategy[list[T]]:
    """Generate lists of exactly ``length`` values drawn from ``strategy``.

    Raises:
        InvalidArgument: If ``length`` is negative.
    """
    if length < 0:
        msg = f'length={length} must be non-negative'
        raise InvalidArgument(msg)
    return st.lists(strategy, min_size=length, max_size=length)


def sequence_of[T](strategies: Iterable[st.SearchStrategy[T]]) -> st.SearchStrategy[list[T]]:
    """Draw from each strategy once, in order, and collect the results."""
    return st.tuples(*strategies).map(list)


def select_weighted(weights: Sequence[int], r: int) -> int:
    """Return the index of the alternative whose cumulative interval contains ``r``.

    Alternative ``i`` owns the half-open interval
    ``[sum(weights[:i]), sum(weights[:i + 1]))``, so zero-weight alternatives
    are never selected.

    Args:
        weights: Non-negative weights, one per alternative.
        r: A value in ``[0, sum(weights))``.

    Returns:
        Index into ``weights``.

    Raises:
        ValueError: If ``r`` is outside ``[0, sum(weights))``.

    Example:
        ```python
        select_weighted([1, 9], 0)  # 0
        select_weighted([1, 9], 1)  # 1
        select_weighted([0, 5], 0)  # 1
        ```
    """
    cumulative = list(accumulate(weights))
    if not cumulative or not 0 <= r < cumulative[-1]:
        msg = f'r={r} is outside [0, {cumulative[-1] if cumulative else 0})'
        raise ValueError(msg)
    return bisect_right(cumulative, r)


def _draw_alternative[T](
    weights: tuple[int, ...],
    alternatives: tuple[st.SearchStrategy[T], ...],
    r: int,
) -> st.SearchStrategy[T]:
    return alternatives[select_weighted(weights, r)]


def frequency[T](*pairs: tuple[int, st.SearchStrategy[T]]) -> st.SearchStrategy[T]:
    """Choose among strategies with probability proportional to their weights.

    A value ``r`` is drawn uniformly from ``[0, total_weight)`` and the
    alternative whose cumulative-weight interval contains it is run.

    Args:
        *pairs: ``(weight, strategy)`` pairs. Weights are non-negative
            integers and at least one must be positive.

    Returns:
        A strategy drawing from the selected alternative.

    Raises:
        InvalidWeightsError: If no pairs are given, a weight is negative or
            not an integer, or all weights are zero.
    """
    weights = tuple(weight for weight, _ in pairs)
    alternatives = tuple(strategy for _, strategy in pairs)

    reason: str | None = None
    if not pairs:
        reason = 'at least one alternative is required'
    elif any(isinstance(w, bool) or not isinstance(w, int) for w in weights):
        reason = 'weights must be integers'
    elif any(w < 0 for w in weights):
        reason = 'weights must be non-negative'
    elif sum(weights) == 0:
        reason = 'total weight must be positive'
    if reason is not None:
        logger.debug('invalid_weights', weights=list(weights), reason=reason)
        raise InvalidWeightsError(weights, reason)

    return choose(0, sum(weights) - 1).flatmap(partial(_draw_alternative, weights, alternatives))
