"""Streaming sample statistics and confidence intervals"""

from ._version import __version__

# Use lazy imports so that importing the package does not pull in pandas
# or pydantic until they are needed

__all__ = [
    "__version__",
    "CompensatedAccumulator",
    "DomainError",
    "SampleStatistics",
    "StatisticalSummary",
    "StatisticsConfig",
    "StreamingStatistics",
    "UnsupportedParameterError",
    "VarianceStatistics",
    "confidence",
    "confidence_interval",
    "confidence_norm",
    "confidence_t",
    "parallel_accumulate",
    "summarize",
]


def __getattr__(name):
    """Lazy import modules on first attribute access."""
    if name == "CompensatedAccumulator":
        from .compensated_sum import CompensatedAccumulator

        return CompensatedAccumulator
    elif name in ["SampleStatistics", "StreamingStatistics", "VarianceStatistics"]:
        from .sample_statistics import SampleStatistics, StreamingStatistics, VarianceStatistics

        return locals()[name]
    elif name in [
        "DomainError",
        "UnsupportedParameterError",
        "confidence",
        "confidence_interval",
        "confidence_norm",
        "confidence_t",
    ]:
        from .intervals import (
            DomainError,
            UnsupportedParameterError,
            confidence,
            confidence_interval,
            confidence_norm,
            confidence_t,
        )

        return locals()[name]
    elif name == "StatisticalSummary" or name == "summarize":
        from .summary import StatisticalSummary, summarize

        return locals()[name]
    elif name == "StatisticsConfig":
        from .config import StatisticsConfig

        return StatisticsConfig
    elif name == "parallel_accumulate":
        from .parallel import parallel_accumulate

        return parallel_accumulate
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
