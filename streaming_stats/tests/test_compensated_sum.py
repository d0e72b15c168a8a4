"""Tests for the compensated running sum."""

import itertools
import math

import numpy as np
import pytest

from streaming_stats.compensated_sum import CompensatedAccumulator


def _accumulate(values):
    acc = CompensatedAccumulator()
    for value in values:
        acc.accept(value)
    return acc


class TestAccept:
    """Sequential accumulation."""

    def test_empty_sum_is_zero(self):
        """A new accumulator starts at zero."""
        acc = CompensatedAccumulator()
        assert acc.get_sum() == 0.0
        assert acc.sum == 0.0
        assert acc.compensation == 0.0

    def test_recovers_small_terms_lost_to_large_ones(self, cancellation_terms):
        """The small terms survive being added to 1e100 and back."""
        assert _accumulate(cancellation_terms).get_sum() == 2.0

    @pytest.mark.parametrize(
        "order", list(itertools.permutations([1.0, 1e100, 1.0, -1e100]))
    )
    def test_result_is_independent_of_order(self, order):
        """Every ordering of the cancellation terms sums to exactly 2."""
        assert _accumulate(order).get_sum() == 2.0

    def test_accept_all_matches_accept(self, cancellation_terms):
        """accept_all is a loop over accept."""
        acc = CompensatedAccumulator()
        acc.accept_all(cancellation_terms)
        assert acc.get_sum() == 2.0

    def test_error_bounded_on_wide_dynamic_range(self):
        """Error stays near machine precision for mixed-magnitude terms."""
        rng = np.random.default_rng(7)
        values = (rng.normal(size=20_000) * 10.0 ** rng.integers(-8, 8, size=20_000)).tolist()
        exact = math.fsum(values)
        magnitude = math.fsum(abs(v) for v in values)

        assert abs(_accumulate(values).get_sum() - exact) <= 1e-14 * magnitude

    def test_nan_propagates(self):
        """Non-finite input is not validated."""
        acc = _accumulate([1.0, float("nan"), 2.0])
        assert math.isnan(acc.get_sum())

    @pytest.mark.parametrize("values", [[1.0, math.inf], [math.inf, 1.0], [2.0, -math.inf, 3.0]])
    def test_infinity_passes_through(self, values):
        """An infinite term yields an infinite sum, not NaN."""
        expected = math.fsum(values)
        assert _accumulate(values).get_sum() == expected

    def test_opposite_infinities_give_nan(self):
        """inf plus -inf stays undefined."""
        assert math.isnan(_accumulate([math.inf, -math.inf]).get_sum())

    def test_combine_keeps_infinity(self):
        """Combining a finite and an infinite partial yields infinity."""
        merged = _accumulate([1.0]).combine(_accumulate([math.inf]))
        assert merged.get_sum() == math.inf
        assert merged.copy().get_sum() == math.inf


class TestCombine:
    """Merging partial sums."""

    @pytest.mark.parametrize("split", [1, 2, 3])
    def test_every_split_recombines_exactly(self, cancellation_terms, split):
        """Any two-way split of the sequence combines to exactly 2."""
        left = _accumulate(cancellation_terms[:split])
        right = _accumulate(cancellation_terms[split:])

        assert left.combine(right).get_sum() == 2.0

    @pytest.mark.parametrize("split", [1, 2, 3])
    def test_split_of_every_permutation(self, split):
        """Splits of reordered terms also combine to exactly 2."""
        for order in itertools.permutations([1.0, 1e100, 1.0, -1e100]):
            left = _accumulate(order[:split])
            right = _accumulate(order[split:])
            assert left.combine(right).get_sum() == 2.0, order

    def test_combine_returns_self(self):
        """combine allows chaining."""
        acc = CompensatedAccumulator()
        assert acc.combine(CompensatedAccumulator()) is acc

    def test_combine_leaves_other_untouched(self, cancellation_terms):
        """The merged-in accumulator keeps its own state."""
        left = _accumulate(cancellation_terms[:2])
        right = _accumulate(cancellation_terms[2:])
        before = (right.sum, right.compensation)

        left.combine(right)

        assert (right.sum, right.compensation) == before

    def test_combine_with_empty(self, cancellation_terms):
        """Merging an empty accumulator is a no-op in either direction."""
        full = _accumulate(cancellation_terms)
        assert CompensatedAccumulator().combine(full).get_sum() == 2.0
        assert full.combine(CompensatedAccumulator()).get_sum() == 2.0


class TestCopy:
    """Copies and representation."""

    def test_copy_is_independent(self):
        """Mutating a copy does not affect the original."""
        acc = _accumulate([1.0, 2.0])
        clone = acc.copy()
        clone.accept(10.0)

        assert acc.get_sum() == 3.0
        assert clone.get_sum() == 13.0

    def test_repr_shows_sum(self):
        """repr reports the compensated sum."""
        assert repr(_accumulate([1.0, 2.0])) == "CompensatedAccumulator(sum=3.0)"
