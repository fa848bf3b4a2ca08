"""
Tests for central tendency & dispersion.

Validates:
    1. Lower-middle median convention
    2. Mode tie-break (first seen wins)
    3. Population standard deviation
    4. Per-channel (step4) and 4-vector variants
"""

import numpy as np
import pytest

from cvmath.core.reductions import max_value, min_value
from cvmath.core.statistics import (
    mean,
    mean_step4,
    median,
    median_step4,
    mode,
    mode_step4,
    mode_vec4,
    std_dev,
)
from cvmath.errors import EmptyInputError, MisalignedChannelError


class TestMean:

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_mean_between_extremes(self):
        """min <= mean <= max on random data."""
        rng = np.random.default_rng(7)
        for _ in range(50):
            data = rng.normal(0, 100, size=rng.integers(1, 30))
            m = mean(data)
            assert min_value(data) <= m <= max_value(data)

    def test_mean_step4(self):
        data = [1, 2, 3, 4, 3, 4, 5, 6]
        assert mean_step4(data) == (2.0, 3.0, 4.0, 5.0)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            mean([])
        with pytest.raises(EmptyInputError):
            mean_step4([])

    def test_mean_step4_misaligned(self):
        with pytest.raises(MisalignedChannelError):
            mean_step4([1.0, 2.0, 3.0, 4.0, 5.0])


class TestMedian:

    def test_odd_length(self):
        assert median([1, 2, 3]) == 2.0
        assert median([9, 1, 5]) == 5.0

    def test_even_length_takes_lower_middle(self):
        """Even length returns the lower middle value, not the average."""
        assert median([1, 2, 3, 4]) == 2.0
        assert median([4, 3, 2, 1]) == 2.0

    def test_single(self):
        assert median([7.5]) == 7.5

    def test_input_not_reordered(self):
        data = [3.0, 1.0, 2.0]
        arr = np.array(data)
        median(data)
        median(arr)
        assert data == [3.0, 1.0, 2.0]
        np.testing.assert_array_equal(arr, [3.0, 1.0, 2.0])

    def test_median_step4(self):
        data = [
            1, 10, 5, 0,
            2, 30, 5, 0,
            3, 20, 5, 9,
        ]
        assert median_step4(data) == (2.0, 20.0, 5.0, 0.0)

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            median([])


class TestMode:

    def test_mode(self):
        assert mode([1, 2, 2, 3, 2, 1]) == 2.0

    def test_tie_goes_to_first_seen(self):
        assert mode([5, 3, 3, 5]) == 5.0
        assert mode([3, 5, 5, 3]) == 3.0

    def test_mode_vec4(self):
        data = [
            1, 2, 3, 4,
            0, 0, 0, 0,
            1, 2, 3, 4,
        ]
        assert mode_vec4(data) == (1.0, 2.0, 3.0, 4.0)

    def test_mode_vec4_groups_do_not_overlap(self):
        """Only aligned groups of 4 count as vectors."""
        data = [9, 1, 1, 1, 1, 1, 1, 1]
        # aligned groups: (9,1,1,1) and (1,1,1,1); tie -> first
        assert mode_vec4(data) == (9.0, 1.0, 1.0, 1.0)

    def test_mode_step4(self):
        data = [
            1, 7, 0, 4,
            1, 8, 2, 4,
            2, 8, 2, 5,
        ]
        assert mode_step4(data) == (1.0, 8.0, 2.0, 4.0)

    def test_mode_vec4_misaligned(self):
        with pytest.raises(MisalignedChannelError):
            mode_vec4([1, 2, 3])

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            mode([])


class TestStdDev:

    def test_constant_is_zero(self):
        assert std_dev([3.25] * 17) == 0.0
        assert std_dev([4.2] * 17) == pytest.approx(0.0, abs=1e-12)

    def test_population_formula(self):
        """Divides by n: std of [2,4,4,4,5,5,7,9] is exactly 2."""
        assert std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_matches_numpy(self):
        np.random.seed(42)
        data = np.random.randn(200)
        assert std_dev(data) == pytest.approx(np.std(data, ddof=0))

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            std_dev([])
