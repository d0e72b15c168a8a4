"""Tests for partition-and-combine reduction."""

import numpy as np
import pytest

from streaming_stats.config import StatisticsConfig
from streaming_stats.parallel import (
    accumulate_chunk,
    accumulate_with_config,
    combine_all,
    create_chunks,
    parallel_accumulate,
)
from streaming_stats.sample_statistics import SampleStatistics, VarianceStatistics


class TestCreateChunks:
    """Contiguous chunking."""

    def test_even_split(self):
        """Chunks cover the range without gaps."""
        assert create_chunks(10, 5) == [(0, 5), (5, 10)]

    def test_ragged_tail(self):
        """The last chunk takes the remainder."""
        assert create_chunks(7, 3) == [(0, 3), (3, 6), (6, 7)]

    def test_empty(self):
        """No items means no chunks."""
        assert create_chunks(0, 4) == []

    def test_invalid_chunk_size(self):
        """Chunk sizes must be positive."""
        with pytest.raises(ValueError):
            create_chunks(10, 0)


class TestCombineAll:
    """Folding partial accumulators."""

    def test_empty_iterable(self):
        """Without partials an empty accumulator is returned."""
        result = combine_all([])
        assert isinstance(result, VarianceStatistics)
        assert result.get_count() == 0

    def test_empty_iterable_with_class(self):
        """The requested class is honoured for an empty fold."""
        assert isinstance(combine_all([], SampleStatistics), SampleStatistics)

    def test_partials_are_not_modified(self, samples_10):
        """The fold writes into a fresh accumulator."""
        first = SampleStatistics.collect(samples_10[:5])
        second = SampleStatistics.collect(samples_10[5:])

        merged = combine_all([first, second])

        assert merged is not first
        assert first.get_count() == 5
        assert merged.get_count() == 10
        assert merged.get_sample_variance() == pytest.approx(295.78888888889276, rel=1e-13)


class TestParallelAccumulate:
    """Pool-based reduction equals sequential accumulation."""

    @pytest.mark.parametrize("accumulator_cls", [VarianceStatistics, SampleStatistics])
    def test_threads_match_sequential(self, normal_samples, accumulator_cls):
        """Thread-pool reduction reproduces the sequential statistics."""
        sequential = accumulator_cls.collect(normal_samples.tolist())

        result = parallel_accumulate(
            normal_samples,
            accumulator_cls=accumulator_cls,
            n_workers=3,
            chunk_size=97,
            use_processes=False,
        )

        assert type(result) is accumulator_cls
        assert result.get_count() == sequential.get_count()
        assert result.get_min() == sequential.get_min()
        assert result.get_max() == sequential.get_max()
        assert result.get_average() == pytest.approx(sequential.get_average(), rel=1e-12)
        assert result.get_sample_variance() == pytest.approx(
            sequential.get_sample_variance(), rel=1e-9
        )

    def test_processes_match_sequential(self, normal_samples):
        """Process-pool reduction reproduces the sequential statistics."""
        sequential = VarianceStatistics.collect(normal_samples.tolist())

        result = parallel_accumulate(normal_samples, n_workers=2)

        assert result.get_count() == 1000
        assert result.get_sample_variance() == pytest.approx(
            sequential.get_sample_variance(), rel=1e-10
        )
        assert result.get_confidence(0.05) == pytest.approx(
            sequential.get_confidence(0.05), rel=1e-10
        )

    def test_empty_input(self):
        """Empty input returns an empty accumulator without a pool."""
        result = parallel_accumulate(np.array([]), accumulator_cls=SampleStatistics)
        assert isinstance(result, SampleStatistics)
        assert result.get_count() == 0

    def test_accumulate_chunk(self, samples_10):
        """A single chunk reduces into the requested class."""
        stats = accumulate_chunk(SampleStatistics, np.array(samples_10))
        assert isinstance(stats, SampleStatistics)
        assert stats.get_average() == pytest.approx(179.7)

    def test_with_config(self, samples_30):
        """Configured strategy and chunking are applied."""
        config = StatisticsConfig(method="sum_of_squares", n_workers=1, chunk_size=7)

        result = accumulate_with_config(np.array(samples_30), config)

        assert isinstance(result, SampleStatistics)
        assert result.get_count() == 30
        assert result.get_sample_variance() == pytest.approx(353.91264367815717, rel=1e-12)
