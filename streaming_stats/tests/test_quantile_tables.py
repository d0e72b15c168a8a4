"""Consistency checks for the embedded quantile tables."""

import numpy as np
import pytest
from scipy import stats

from streaming_stats.quantile_tables import (
    NORMAL_PROBABILITIES,
    NORMAL_QUANTILES,
    T_DEGREES_OF_FREEDOM,
    T_PROBABILITIES,
    T_QUANTILES,
)


class TestTableShape:
    """Axes and layout."""

    def test_normal_axis(self):
        """Normal probabilities are the documented, increasing set."""
        assert NORMAL_PROBABILITIES == (0.9, 0.95, 0.96, 0.975, 0.98, 0.99, 0.995, 0.999, 0.9995)
        assert len(NORMAL_QUANTILES[1]) == len(NORMAL_PROBABILITIES)

    def test_t_axes(self):
        """t probabilities add 0.9875; degrees of freedom are the documented rows."""
        assert T_PROBABILITIES == (
            0.9, 0.95, 0.96, 0.975, 0.98, 0.9875, 0.99, 0.995, 0.999, 0.9995,
        )  # fmt: skip
        assert T_DEGREES_OF_FREEDOM == tuple(range(1, 31)) + (
            35, 40, 50, 60, 70, 80, 90, 100, 150, 200, 250, 300, 400, 500, 600, 800, 1000,
        )  # fmt: skip

    def test_every_t_row_is_complete(self):
        """Each row carries df plus one quantile per probability."""
        for row in T_QUANTILES:
            assert len(row) == len(T_PROBABILITIES) + 1

    @pytest.mark.parametrize(
        "axis", [NORMAL_PROBABILITIES, T_PROBABILITIES, T_DEGREES_OF_FREEDOM]
    )
    def test_axes_strictly_increasing(self, axis):
        """Binary search requires strictly increasing axes."""
        assert all(a < b for a, b in zip(axis, axis[1:]))

    def test_quantiles_decrease_with_df(self):
        """t quantiles shrink towards the Normal quantile as df grows."""
        grid = np.array(T_QUANTILES[1:])[:, 1:]
        assert np.all(np.diff(grid, axis=0) < 0)

    def test_t_exceeds_normal(self):
        """Every t quantile is above the Normal quantile for the same p."""
        for col, p in enumerate(T_PROBABILITIES, start=1):
            if p not in NORMAL_PROBABILITIES:
                continue
            z = NORMAL_QUANTILES[1][NORMAL_PROBABILITIES.index(p)]
            assert all(row[col] > z for row in T_QUANTILES[1:])


class TestAgainstScipy:
    """Independent check of the tabulated values."""

    @pytest.mark.parametrize("col, p", list(enumerate(NORMAL_PROBABILITIES)))
    def test_normal(self, col, p):
        """Normal quantiles match scipy.stats.norm.ppf."""
        assert NORMAL_QUANTILES[1][col] == pytest.approx(stats.norm.ppf(p), rel=1e-8)

    @pytest.mark.parametrize("row", T_QUANTILES[1:], ids=lambda r: f"df={int(r[0])}")
    def test_student_t(self, row):
        """t quantiles match scipy.stats.t.ppf for every df and p."""
        df = row[0]
        expected = stats.t.ppf(np.array(T_PROBABILITIES), df)
        np.testing.assert_allclose(np.array(row[1:]), expected, rtol=1e-6)
