"""Generator error types: dual struct+exception for value-based and raise-based code.

The exception variants subclass ``hypothesis.errors.InvalidArgument`` so that
Hypothesis reports them the same way it reports misuse of its own strategies.
"""

from __future__ import annotations

import msgspec
from hypothesis.errors import InvalidArgument

__all__ = [
    'InvalidWeights',
    'InvalidWeightsError',
    'SampleSizeOutOfRange',
    'SampleSizeOutOfRangeError',
]


# --- Sampling Errors ---


class SampleSizeOutOfRange(msgspec.Struct, frozen=True, gc=False):
    """Requested sample size outside [0, population_size] - struct variant."""

    size: int
    population_size: int

    def to_exception(self) -> SampleSizeOutOfRangeError:
        """Convert to exception for raise-based code."""
        return SampleSizeOutOfRangeError(self.size, self.population_size)


class SampleSizeOutOfRangeError(InvalidArgument):
    """Requested sample size outside [0, population_size] - exception variant."""

    def __init__(self, size: int, population_size: int) -> None:
        self.size = size
        self.population_size = population_size
        super().__init__(
            f'Cannot pick {size} values from a population of {population_size} '
            f'(expected an int 0 <= n <= {population_size})'
        )

    def to_struct(self) -> SampleSizeOutOfRange:
        """Convert to struct for value-based code."""
        return SampleSizeOutOfRange(self.size, self.population_size)


# --- Weighting Errors ---


class InvalidWeights(msgspec.Struct, frozen=True, gc=False):
    """Weighted choice given unusable weights - struct variant."""

    weights: tuple[int, ...]
    reason: str

    def to_exception(self) -> InvalidWeightsError:
        """Convert to exception for raise-based code."""
        return InvalidWeightsError(self.weights, self.reason)


class InvalidWeightsError(InvalidArgument):
    """Weighted choice given unusable weights - exception variant."""

    def __init__(self, weights: tuple[int, ...], reason: str) -> None:
        self.weights = tuple(weights)
        self.reason = reason
        super().__init__(f'Invalid weights {list(self.weights)}: {reason}')

    def to_struct(self) -> InvalidWeights:
        """Convert to struct for value-based code."""
        return InvalidWeights(self.weights, self.reason)
