"""
Tests for the power-of-two helpers.
"""

import pytest

from pylinalg.core.compute.bits import is_power_of_two, next_power_of_two
from pylinalg.core.exceptions import InvalidArgumentError


class TestIsPowerOfTwo:

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024, 2 ** 40])
    def test_powers(self, n):
        assert is_power_of_two(n)

    @pytest.mark.parametrize("n", [0, 3, 5, 6, 7, 12, 1023])
    def test_non_powers(self, n):
        assert not is_power_of_two(n)

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError):
            is_power_of_two(-4)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidArgumentError):
            is_power_of_two(4.0)


class TestNextPowerOfTwo:

    @pytest.mark.parametrize("n, expected", [
        (0, 1),
        (1, 1),
        (2, 2),
        (3, 4),
        (5, 8),
        (8, 8),
        (9, 16),
        (1000, 1024),
    ])
    def test_values(self, n, expected):
        assert next_power_of_two(n) == expected

    @pytest.mark.parametrize("n", range(1, 200))
    def test_result_is_smallest_power_at_least_n(self, n):
        result = next_power_of_two(n)
        assert is_power_of_two(result)
        assert result >= n
        assert result // 2 < n
