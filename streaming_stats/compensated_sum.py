"""Compensated floating-point summation.

This module provides a running sum that tracks the low-order bits lost by
each floating-point addition and folds them back in when the sum is read.
It is the building block for the streaming accumulators in
:mod:`streaming_stats.sample_statistics`.

Example:
    >>> from streaming_stats.compensated_sum import CompensatedAccumulator
    >>> acc = CompensatedAccumulator()
    >>> for value in [1.0, 1e100, 1.0, -1e100]:
    ...     acc.accept(value)
    >>> acc.get_sum()
    2.0
"""

import math
from typing import Iterable


class CompensatedAccumulator:
    """Running sum with Neumaier (Kahan-Babuska) error compensation.

    The error of :meth:`get_sum` does not grow with the number of accepted
    terms, unlike naive summation whose error grows as O(n * eps).
    Non-finite values are not validated and propagate through the sum. An
    infinite term whose compensation turns into NaN is reported as the
    infinite plain sum.

    Attributes:
        sum: Running sum of the high-order parts.
        compensation: Accumulated low-order parts lost by rounding.
        simple_sum: Uncompensated running sum, used for infinite results.

    References:
        Neumaier, A. (1974). "Rundungsfehleranalyse einiger Verfahren zur
        Summation endlicher Summen." ZAMM 54(1), 39-51.
    """

    def __init__(self) -> None:
        self.sum = 0.0
        self.compensation = 0.0
        self.simple_sum = 0.0

    def accept(self, value: float) -> None:
        """Add a single term to the sum.

        Args:
            value: The term to add.
        """
        self.simple_sum += value
        self._add(value)

    def _add(self, value: float) -> None:
        total = self.sum + value
        if abs(self.sum) >= abs(value):
            self.compensation += (self.sum - total) + value
        else:
            self.compensation += (value - total) + self.sum
        self.sum = total

    def accept_all(self, values: Iterable[float]) -> None:
        """Add every term of an iterable to the sum."""
        for value in values:
            self.accept(value)

    def combine(self, other: "CompensatedAccumulator") -> "CompensatedAccumulator":
        """Merge another accumulator into this one.

        Both the other sum and its compensation are added as compensated
        terms, so splitting a sequence anywhere and combining the halves
        keeps the same error bound as sequential accumulation. The other
        accumulator is not modified.

        Args:
            other: Accumulator to merge into this one.

        Returns:
            This accumulator, to allow chaining.
        """
        self._add(other.sum)
        self._add(other.compensation)
        self.simple_sum += other.simple_sum
        return self

    def get_sum(self) -> float:
        """Return the compensated sum of all accepted terms."""
        total = self.sum + self.compensation
        if math.isnan(total) and math.isinf(self.simple_sum):
            return self.simple_sum
        return total

    def copy(self) -> "CompensatedAccumulator":
        """Return an independent copy of this accumulator."""
        clone = CompensatedAccumulator()
        clone.sum = self.sum
        clone.compensation = self.compensation
        clone.simple_sum = self.simple_sum
        return clone

    def __repr__(self) -> str:
        return f"CompensatedAccumulator(sum={self.get_sum()!r})"
