"""Configuration management using Pydantic v2 models.

This module provides validated configuration for streaming statistics:
which accumulator strategy to use, the default significance level for
confidence intervals, parallel reduction settings and logging.

Examples:
    Build a configuration in code::

        from streaming_stats.config import StatisticsConfig

        config = StatisticsConfig(alpha=0.01, method="sum_of_squares")
        stats = config.create_accumulator()

    Loading from file::

        config = StatisticsConfig.from_yaml(Path("stats.yaml"))
        config.setup_logging()
"""

import logging
import os
from pathlib import Path
import sys
from typing import List, Literal, Optional, Union
import warnings

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from streaming_stats._warnings import ConfigurationWarning
from streaming_stats.intervals import SUPPORTED_ALPHAS
from streaming_stats.sample_statistics import SampleStatistics, VarianceStatistics

PACKAGE_LOGGER = "streaming_stats"
LOOKUP_LOGGER = "streaming_stats.intervals"

ACCUMULATOR_METHODS = {
    "welford": VarianceStatistics,
    "sum_of_squares": SampleStatistics,
}


class LoggingConfig(BaseModel):
    """Handlers and levels for the ``streaming_stats`` logger tree."""

    enabled: bool = Field(default=True, description="Enable logging")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None, description="Log file path (None=no file logging)"
    )
    console_output: bool = Field(default=True, description="Log to console")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    trace_lookups: bool = Field(
        default=False,
        description="Emit DEBUG records for quantile interpolation and clamping",
    )


class StatisticsConfig(BaseModel):
    """Settings for accumulating sample statistics.

    Attributes:
        alpha: Default significance level for confidence intervals.
        method: Accumulator strategy; ``"welford"`` selects
            ``VarianceStatistics`` and ``"sum_of_squares"`` selects
            ``SampleStatistics``.
        n_workers: Worker count for parallel reduction (None = CPU count).
        chunk_size: Samples per partition for parallel reduction
            (None = split evenly across workers).
        logging: Logging settings.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    alpha: float = Field(default=0.05, description="Significance level")
    method: Literal["welford", "sum_of_squares"] = Field(
        default="welford", description="Accumulator strategy"
    )
    n_workers: Optional[int] = Field(default=None, ge=1, description="Parallel workers")
    chunk_size: Optional[int] = Field(default=None, ge=1, description="Samples per partition")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("alpha")
    @classmethod
    def validate_alpha(cls, v: float) -> float:
        """Reject significance levels without tabulated quantiles.

        Args:
            v: Significance level to validate.

        Returns:
            float: The validated significance level.
        """
        if v not in SUPPORTED_ALPHAS:
            raise ValueError(f"alpha must be one of {SUPPORTED_ALPHAS}, got {v}")
        return v

    @model_validator(mode="after")
    def warn_on_oversubscription(self):
        """Warn when more workers are requested than CPUs are available."""
        cpus = os.cpu_count() or 1
        if self.n_workers is not None and self.n_workers > cpus:
            warnings.warn(
                f"n_workers={self.n_workers} exceeds the {cpus} available CPUs",
                ConfigurationWarning,
                stacklevel=2,
            )
        return self

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "StatisticsConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            StatisticsConfig object with validated parameters.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            ValidationError: If configuration is invalid.
        """
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # Remove private anchors if present
        data = {k: v for k, v in data.items() if not k.startswith("_")}

        return cls(**data)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path where to save the configuration.
        """
        import yaml

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)

    def accumulator_class(self):
        """Return the accumulator class selected by ``method``."""
        return ACCUMULATOR_METHODS[self.method]

    def create_accumulator(self):
        """Return a new, empty accumulator of the configured strategy."""
        return self.accumulator_class()()

    def setup_logging(self) -> "logging.Logger":
        """Attach the configured handlers to the ``streaming_stats`` logger.

        Quantile lookups in :mod:`streaming_stats.intervals` report which
        table rows they interpolate between or clamp to at DEBUG level.
        ``trace_lookups`` lets those records through without lowering the
        level of the rest of the package.

        Returns:
            The package logger.
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not self.logging.enabled:
            return package_logger

        package_logger.setLevel(self.logging.level)
        logging.getLogger(LOOKUP_LOGGER).setLevel(
            logging.DEBUG if self.logging.trace_lookups else logging.NOTSET
        )

        package_logger.handlers.clear()
        formatter = logging.Formatter(self.logging.format)
        for handler in self._build_handlers():
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)
        return package_logger

    def _build_handlers(self) -> "List[logging.Handler]":
        handlers: List[logging.Handler] = []
        if self.logging.console_output:
            handlers.append(logging.StreamHandler(sys.stdout))
        if self.logging.log_file:
            log_path = Path(self.logging.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_path))
        return handlers
