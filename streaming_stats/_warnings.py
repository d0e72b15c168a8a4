"""Custom warning classes for the streaming_stats package.

These warning classes allow users to programmatically filter, suppress,
or capture warnings using Python's standard ``warnings`` module.

Example:
    Suppress precision warnings while reducing a large benchmark run::

        import warnings
        from streaming_stats._warnings import PrecisionLossWarning

        warnings.filterwarnings("ignore", category=PrecisionLossWarning)

    Capture configuration warnings while loading settings::

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always", ConfigurationWarning)
            config = StatisticsConfig.from_yaml(path)
            issues = [x for x in w if issubclass(x.category, ConfigurationWarning)]
"""


class StreamingStatsWarning(UserWarning):
    """Base class for all streaming_stats warnings."""


class ConfigurationWarning(StreamingStatsWarning):
    """Unusual or potentially incorrect configuration parameters.

    Raised during config validation when parameter values fall outside
    typical ranges (e.g., more worker processes than available CPUs).
    """


class PrecisionLossWarning(StreamingStatsWarning):
    """Floating-point cancellation detected in a derived statistic.

    Raised when the sum-of-squares variance formula produces a negative
    value, which can only come from rounding error. The value is clamped
    to zero; switch to ``VarianceStatistics`` for data with a large mean
    relative to its spread.
    """
