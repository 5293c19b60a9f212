"""Tests for the vectorized reduction helpers."""

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from landbattle.utils.vectorized import (
    MAX_DISTRIBUTION_VALUE,
    MeanStdDev,
    distribution,
    mean_and_stddev,
    vector_sum,
)


class TestVectorSum:
    """Tests for vector_sum."""

    def test_sums_values(self):
        assert vector_sum([1, 2, 3, 4]) == 10

    def test_empty_is_zero(self):
        assert vector_sum([]) == 0

    def test_large_input_does_not_overflow(self):
        values = np.full(1 << 20, 1000, dtype=np.int64)
        assert vector_sum(values) == 1000 * (1 << 20)

    def test_rejects_nested_arrays(self):
        with pytest.raises(ValueError, match="flat"):
            vector_sum([[1, 2], [3, 4]])

    @given(st.lists(st.integers(min_value=-1000, max_value=1000)))
    def test_matches_builtin_sum(self, values):
        assert vector_sum(values) == sum(values)


class TestMeanAndStddev:
    """Tests for mean_and_stddev."""

    def test_population_statistics(self):
        result = mean_and_stddev([2, 4, 4, 4, 5, 5, 7, 9])
        assert result == MeanStdDev(5.0, 2.0)

    def test_constant_input_has_zero_spread(self):
        assert mean_and_stddev([3, 3, 3]) == MeanStdDev(3.0, 0.0)

    def test_empty_is_zero(self):
        assert mean_and_stddev([]) == MeanStdDev(0.0, 0.0)

    @given(st.lists(st.integers(min_value=0, max_value=50), min_size=1))
    def test_matches_numpy(self, values):
        result = mean_and_stddev(values)
        assert result.mean == pytest.approx(float(np.mean(values)))
        assert result.stddev == pytest.approx(float(np.std(values)), abs=1e-5)
        assert not math.isnan(result.stddev)


class TestDistribution:
    """Tests for distribution."""

    def test_fractions_per_value(self):
        assert distribution([0, 1, 1, 3], 3) == [0.25, 0.5, 0.0, 0.25]

    def test_values_above_max_land_in_top_bin(self):
        assert distribution([0, 5, 9], 2) == pytest.approx([1 / 3, 0.0, 2 / 3])

    def test_empty_input(self):
        assert distribution([], 4) == []

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError, match="non-negative"):
            distribution([1, -1], 3)

    @pytest.mark.parametrize("max_value", [-1, MAX_DISTRIBUTION_VALUE + 1])
    def test_rejects_max_out_of_range(self, max_value):
        with pytest.raises(ValueError, match="max_value"):
            distribution([1], max_value)

    @given(st.lists(st.integers(min_value=0, max_value=20), min_size=1))
    def test_sums_to_one(self, values):
        assert math.fsum(distribution(values, 10)) == pytest.approx(1.0)
