"""Streaming accumulators for sample statistics.

This module reduces a stream of samples, one value at a time, to count,
sum, min, max, variance and standard deviation without keeping the samples
in memory. Partial accumulators built over disjoint partitions of a stream
can be merged with ``combine``, which makes them suitable for parallel
map/reduce (see :mod:`streaming_stats.parallel`).

Two strategies are provided:

- :class:`SampleStatistics` keeps a compensated sum of squares. It is the
  cheapest per sample, but the variance formula subtracts two nearly equal
  quantities when the mean is large relative to the spread.
- :class:`VarianceStatistics` keeps a running mean and the sum of squared
  deviations (Welford's algorithm), which stays accurate in that regime.
  It is the recommended default and is exported as ``StreamingStatistics``.

Both classes share the same interface; pick one explicitly. Accumulators
are not thread-safe: give each partition its own accumulator and combine
them once the partitions are done.

Example:
    Collect statistics from a generator and build a 95% interval::

        from streaming_stats.sample_statistics import VarianceStatistics

        stats = VarianceStatistics.collect(run_benchmark() for _ in range(20))
        c = stats.get_confidence(0.05)
        print(f"{stats.get_average():.3f} +/- {c:.3f}")

References:
    Welford, B. P. (1962). "Note on a method for calculating corrected sums
    of squares and products." Technometrics 4(3), 419-420.

    Chan, T. F., Golub, G. H. & LeVeque, R. J. (1979). "Updating formulae
    and a pairwise algorithm for computing sample variances."
"""

import math
from typing import Iterable, Type, TypeVar
import warnings

import numpy as np

from streaming_stats._warnings import PrecisionLossWarning
from streaming_stats.compensated_sum import CompensatedAccumulator
from streaming_stats.intervals import confidence

_S = TypeVar("_S", bound="_BaseStatistics")


class _BaseStatistics:
    """Count, sum, min and max bookkeeping shared by both strategies.

    Subclasses track their second moment through ``_accept_moment`` and
    ``_combine_moment`` and define the two variance getters.
    """

    def __init__(self) -> None:
        self._count = 0
        self._min = math.inf
        self._max = -math.inf
        self._sum = CompensatedAccumulator()

    @classmethod
    def collect(cls: Type[_S], values: Iterable[float]) -> _S:
        """Build an accumulator from an iterable of samples.

        Args:
            values: Samples to accept, in order.

        Returns:
            A new accumulator holding all samples.
        """
        stats = cls()
        for value in values:
            stats.accept(value)
        return stats

    def accept(self, value: float) -> None:
        """Add one sample.

        Args:
            value: The sample. Non-finite values are not validated.
        """
        self._count += 1
        self._sum.accept(value)
        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._accept_moment(value)

    def accept_array(self, values) -> None:
        """Add every sample of an array-like.

        Args:
            values: Array-like of samples; multi-dimensional input is
                flattened.
        """
        flat = np.asarray(values, dtype=np.float64).ravel()
        for value in flat.tolist():
            self.accept(value)

    def combine(self: _S, other: _S) -> _S:
        """Merge the statistics of another accumulator into this one.

        The result matches accumulating both partitions in sequence, up to
        floating-point rounding. ``other`` is not modified, but it must no
        longer be mutated by another thread while the merge runs.

        Args:
            other: Accumulator of the same class.

        Returns:
            This accumulator, to allow chaining.

        Raises:
            TypeError: If ``other`` uses a different strategy.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        self._combine_moment(other)
        self._count += other._count
        self._sum.combine(other._sum)
        self._min = min(self._min, other._min)
        self._max = max(self._max, other._max)
        return self

    def _accept_moment(self, value: float) -> None:
        raise NotImplementedError

    def _combine_moment(self: _S, other: _S) -> None:
        raise NotImplementedError

    def get_count(self) -> int:
        """Return the number of accepted samples."""
        return self._count

    def get_min(self) -> float:
        """Return the smallest sample, or ``inf`` when empty."""
        return self._min

    def get_max(self) -> float:
        """Return the largest sample, or ``-inf`` when empty."""
        return self._max

    def get_sum(self) -> float:
        """Return the compensated sum of all samples."""
        return self._sum.get_sum()

    def get_average(self) -> float:
        """Return the arithmetic mean, or ``0.0`` when empty."""
        if self._count == 0:
            return 0.0
        return self.get_sum() / self._count

    def get_sample_variance(self) -> float:
        """Return the unbiased sample variance (divisor ``count - 1``)."""
        raise NotImplementedError

    def get_population_variance(self) -> float:
        """Return the population variance (divisor ``count``)."""
        raise NotImplementedError

    def get_sample_standard_deviation(self) -> float:
        """Return the square root of the sample variance."""
        return math.sqrt(self.get_sample_variance())

    def get_population_standard_deviation(self) -> float:
        """Return the square root of the population variance.

        Use this only if the entire population has been sampled.
        """
        return math.sqrt(self.get_population_variance())

    def get_confidence(self, alpha: float) -> float:
        """Return the confidence half-width for the population mean.

        Student's t is used for fewer than 30 samples, the Normal
        distribution otherwise, both with the sample standard deviation.
        The interval is ``[average - c, average + c]``.

        Args:
            alpha: Significance level; 0.05 is a 95 percent confidence level.
                Supported values: 0.05, 0.02, 0.01, 0.001.

        Returns:
            The half-width ``c``.

        Raises:
            UnsupportedParameterError: If ``alpha`` is not supported.
            DomainError: If fewer than two samples were accepted.
        """
        return confidence(alpha, self.get_sample_standard_deviation(), self._count)

    def summary(self, alpha: float = 0.05):
        """Return a :class:`~streaming_stats.summary.StatisticalSummary` snapshot."""
        from streaming_stats.summary import summarize

        return summarize(self, alpha=alpha)

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        conf95 = self.get_confidence(0.05) if self._count >= 2 else math.nan
        return (
            f"{type(self).__name__}{{count={self._count:d}, sum={self.get_sum():f}, "
            f"min={self._min:f}, avg={self.get_average():f}, max={self._max:f}, "
            f"stdev={self.get_sample_standard_deviation():f}, conf95%={conf95:f}}}"
        )


class SampleStatistics(_BaseStatistics):
    """Sample statistics from a compensated sum of squares.

    Each sample costs two compensated additions. The variance is derived as
    ``(sum_of_squares - average**2 * count) / divisor``, which loses
    precision when the mean is large compared to the standard deviation;
    prefer :class:`VarianceStatistics` for such data.

    Edge cases:
        Both variances are ``0.0`` for an empty accumulator, and the sample
        variance is ``0.0`` for a single sample. A negative variance caused
        by cancellation is clamped to ``0.0`` with a
        :class:`~streaming_stats._warnings.PrecisionLossWarning`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._sum_of_squares = CompensatedAccumulator()

    def _accept_moment(self, value: float) -> None:
        self._sum_of_squares.accept(value * value)

    def _combine_moment(self, other: "SampleStatistics") -> None:
        self._sum_of_squares.combine(other._sum_of_squares)

    def get_sum_of_squares(self) -> float:
        """Return the compensated sum of squared samples."""
        return self._sum_of_squares.get_sum()

    def get_sample_variance(self) -> float:
        n = self._count
        if n <= 1:
            return 0.0
        avg = self.get_average()
        return self._non_negative((self.get_sum_of_squares() - avg * avg * n) / (n - 1))

    def get_population_variance(self) -> float:
        n = self._count
        if n == 0:
            return 0.0
        avg = self.get_average()
        return self._non_negative((self.get_sum_of_squares() / n) - avg * avg)

    @staticmethod
    def _non_negative(variance: float) -> float:
        if variance < 0.0:
            warnings.warn(
                f"Variance of {variance!r} clamped to 0.0 after cancellation in the "
                "sum-of-squares formula; consider VarianceStatistics",
                PrecisionLossWarning,
                stacklevel=3,
            )
            return 0.0
        return variance


class VarianceStatistics(_BaseStatistics):
    """Sample statistics from a running mean and sum of squared deviations.

    Uses Welford's online update for single samples and the pairwise
    formula of Chan et al. for ``combine``::

        delta = mean_b - mean_a
        mean = mean_a + delta * n_b / n
        M2 = M2_a + M2_b + delta**2 * n_a * n_b / n

    The sum of squares is never formed, so the variance stays accurate when
    samples have a large magnitude relative to their spread.

    Edge cases:
        Both variances are ``0.0`` for an empty accumulator, and the sample
        variance is ``0.0`` for a single sample.
    """

    def __init__(self) -> None:
        super().__init__()
        self._mean = 0.0
        self._m2 = 0.0

    def _accept_moment(self, value: float) -> None:
        # _count already includes this sample
        delta = value - self._mean
        self._mean += delta / self._count
        self._m2 += delta * (value - self._mean)

    def _combine_moment(self, other: "VarianceStatistics") -> None:
        n_a = self._count
        n_b = other._count
        if n_b == 0:
            return
        if n_a == 0:
            self._mean = other._mean
            self._m2 = other._m2
            return
        n = n_a + n_b
        delta = other._mean - self._mean
        self._mean += delta * n_b / n
        self._m2 += other._m2 + delta * delta * n_a * n_b / n

    def accept_array(self, values) -> None:
        """Add every sample of an array-like.

        The batch is reduced with numpy into one partial (count, mean, M2)
        and merged with the pairwise formula, so large arrays avoid the
        per-sample Python loop for the second moment.

        Args:
            values: Array-like of samples; multi-dimensional input is
                flattened.
        """
        flat = np.asarray(values, dtype=np.float64).ravel()
        if flat.size == 0:
            return
        partial = VarianceStatistics()
        partial._count = int(flat.size)
        partial._sum.accept_all(flat.tolist())
        partial._min = float(np.min(flat))
        partial._max = float(np.max(flat))
        partial._mean = float(np.mean(flat))
        partial._m2 = float(np.sum((flat - partial._mean) ** 2))
        self.combine(partial)

    def get_m2(self) -> float:
        """Return the running sum of squared deviations from the mean."""
        return self._m2

    def get_sample_variance(self) -> float:
        if self._count <= 1:
            return 0.0
        return self._m2 / (self._count - 1)

    def get_population_variance(self) -> float:
        if self._count == 0:
            return 0.0
        return self._m2 / self._count


#: Recommended accumulator for new code.
StreamingStatistics = VarianceStatistics
