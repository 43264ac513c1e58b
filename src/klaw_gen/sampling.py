"""Sampling without replacement: pick N values or generators out of a population.

A sample of ``n`` out of ``L`` elements is produced by drawing ``L - n``
removal indices uniformly from ``[0, REMOVAL_INDEX_SCALE * L)`` and deleting
the element at ``index % current_length`` for each of them, in order, from a
private copy of the population. The survivors keep their original relative
order.

Every subset is reachable, but the distribution is not exactly uniform over
subsets; the reduction modulo a shrinking length favours some positions.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from hypothesis import strategies as st

from klaw_gen._logging import get_logger
from klaw_gen.combinators import choose, list_of_length, sequence_of
from klaw_gen.errors import SampleSizeOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = [
    'REMOVAL_INDEX_SCALE',
    'pick_generators',
    'pick_values',
    'remove_items',
    'some_of_generators',
    'some_of_values',
]

logger = get_logger(__name__)

# Removal indices are drawn from a range this many times the population size.
REMOVAL_INDEX_SCALE = 10


def _check_sample_size(n: int, population_size: int) -> None:
    # bool is an int subclass but never a sample size.
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= population_size:
        logger.debug('sample_size_out_of_range', size=n, population_size=population_size)
        raise SampleSizeOutOfRangeError(n, population_size)


def remove_items[T](population: Iterable[T], indices: Iterable[int]) -> list[T]:
    """Remove one element per index from a copy of ``population``.

    Each index is reduced modulo the current length of the working list, so
    any non-negative integer is a valid removal index.

    Args:
        population: Elements to remove from. Never mutated.
        indices: Removal indices, applied in order.

    Returns:
        The surviving elements in their original relative order.

    Example:
        ```python
        remove_items('ABCDE', [12, 7, 30])
        # ['B', 'D']
        ```
    """
    items = list(population)
    for index in indices:
        del items[index % len(items)]
    return items


def pick_values[T](n: int, population: Iterable[T]) -> st.SearchStrategy[list[T]]:
    """Generate lists of ``n`` elements picked from ``population`` without replacement.

    The population is copied when this function is called, so later changes
    to the caller's collection do not affect the strategy. Duplicate values
    are treated as distinct positions.

    Args:
        n: Number of elements to pick, ``0 <= n <= len(population)``.
        population: Elements to pick from.

    Returns:
        A strategy producing lists of exactly ``n`` elements, in population order.

    Raises:
        SampleSizeOutOfRangeError: If ``n`` is not an int in ``[0, len(population)]``.
            Raised here, before any value is drawn.

    Example:
        ```python
        @given(pick_values(2, ['red', 'green', 'blue']))
        def test_two_colours(colours):
            assert len(colours) == 2
        ```
    """
    values: Sequence[T] = tuple(population)
    _check_sample_size(n, len(values))

    to_remove = len(values) - n
    if to_remove == 0:
        indices: st.SearchStrategy[list[int]] = st.just([])
    else:
        indices = list_of_length(choose(0, REMOVAL_INDEX_SCALE * len(values) - 1), to_remove)
    return indices.map(partial(remove_items, values))


def _run_selected[T](
    generators: Sequence[st.SearchStrategy[T]],
    selected: list[int],
) -> st.SearchStrategy[list[T]]:
    return sequence_of(generators[i] for i in selected)


def pick_generators[T](n: int, generators: Iterable[st.SearchStrategy[T]]) -> st.SearchStrategy[list[T]]:
    """Pick ``n`` of ``generators`` without replacement and draw one value from each.

    Values are returned in the order the generators appear in ``generators``.
    Errors raised by a selected generator propagate unchanged.

    Raises:
        SampleSizeOutOfRangeError: If ``n`` is not an int in ``[0, len(generators)]``.
    """
    strategies = tuple(generators)
    return pick_values(n, range(len(strategies))).flatmap(partial(_run_selected, strategies))


def some_of_values[T](population: Iterable[T]) -> st.SearchStrategy[list[T]]:
    """Generate a random-size selection of ``population``, from empty to all of it."""
    values = tuple(population)
    return choose(0, len(values)).flatmap(partial(pick_values, population=values))


def some_of_generators[T](generators: Iterable[st.SearchStrategy[T]]) -> st.SearchStrategy[list[T]]:
    """Pick a random number of ``generators`` and draw one value from each."""
    strategies = tuple(generators)
    return choose(0, len(strategies)).flatmap(partial(pick_generators, generators=strategies))
