"""Snapshots of accumulator state for reporting.

An accumulator keeps changing while samples arrive; :func:`summarize`
freezes its derived statistics, together with the confidence interval for
the mean, into a :class:`StatisticalSummary` that can be exported as a dict
or a pandas DataFrame.
"""

from dataclasses import asdict, dataclass
import math
from typing import Any, Dict, Mapping

import pandas as pd

from streaming_stats.intervals import probability_for_alpha


@dataclass(frozen=True)
class StatisticalSummary:
    """Derived statistics of an accumulator at one point in time.

    ``confidence``, ``ci_lower`` and ``ci_upper`` are NaN when fewer than
    two samples were accepted, since no interval can be estimated.
    """

    count: int
    sum: float
    min: float
    max: float
    mean: float
    sample_variance: float
    population_variance: float
    sample_std: float
    population_std: float
    alpha: float
    confidence: float
    ci_lower: float
    ci_upper: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert the summary to a plain dictionary."""
        return asdict(self)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert summary to pandas DataFrame.

        Returns:
            DataFrame with one ``metric``/``value`` row per statistic
        """
        rows = [{"metric": metric, "value": value} for metric, value in self.to_dict().items()]
        return pd.DataFrame(rows)


def summarize(accumulator, alpha: float = 0.05) -> StatisticalSummary:
    """Snapshot the statistics of an accumulator.

    Args:
        accumulator: A ``SampleStatistics`` or ``VarianceStatistics``.
        alpha: Significance level of the confidence interval.

    Returns:
        The frozen summary.

    Raises:
        UnsupportedParameterError: If ``alpha`` is not supported.
    """
    probability_for_alpha(alpha)
    count = accumulator.get_count()
    mean = accumulator.get_average()
    if count >= 2:
        half_width = accumulator.get_confidence(alpha)
    else:
        half_width = math.nan

    return StatisticalSummary(
        count=count,
        sum=accumulator.get_sum(),
        min=accumulator.get_min(),
        max=accumulator.get_max(),
        mean=mean,
        sample_variance=accumulator.get_sample_variance(),
        population_variance=accumulator.get_population_variance(),
        sample_std=accumulator.get_sample_standard_deviation(),
        population_std=accumulator.get_population_standard_deviation(),
        alpha=alpha,
        confidence=half_width,
        ci_lower=mean - half_width,
        ci_upper=mean + half_width,
    )


def summaries_to_dataframe(accumulators: Mapping[str, Any], alpha: float = 0.05) -> pd.DataFrame:
    """Tabulate several named accumulators side by side.

    Args:
        accumulators: Mapping from a label (e.g. benchmark name) to an
            accumulator.
        alpha: Significance level of the confidence intervals.

    Returns:
        DataFrame indexed by label with one column per statistic.
    """
    records = {name: summarize(acc, alpha).to_dict() for name, acc in accumulators.items()}
    df = pd.DataFrame.from_dict(records, orient="index")
    df.index.name = "name"
    return df
