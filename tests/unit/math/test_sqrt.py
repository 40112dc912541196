"""Tests for the exact integer square root."""

import math
import random

import pytest

from zap.errors import ArithmeticOverflow, SqrtDidNotConverge
from zap.math.sqrt import floor_sqrt
from zap.safe_int import UINT512_MAX, S


class TestFloorSqrtSmall:
    """Small and boundary values."""

    @pytest.mark.parametrize("n", list(range(0, 300)))
    def test_matches_isqrt(self, n):
        assert floor_sqrt(n) == math.isqrt(n)

    def test_perfect_squares_and_neighbours(self):
        """k^2 - 1, k^2 and k^2 + 1 straddle the root exactly."""
        for k in (2, 3, 10, 2**32, 2**128 - 1, 10**38):
            assert floor_sqrt(k * k) == k
            assert floor_sqrt(k * k - 1) == k - 1
            assert floor_sqrt(k * k + 1) == k

    def test_accepts_safeint(self):
        assert floor_sqrt(S(1_000_000)) == 1000

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            floor_sqrt(-1)


class TestFloorSqrtWide:
    """Values across the 512-bit range."""

    def test_uint512_max(self):
        assert floor_sqrt(UINT512_MAX) == 2**256 - 1

    def test_powers_of_two(self):
        for bits in range(1, 513):
            n = 1 << bits
            assert floor_sqrt(n) == math.isqrt(n)
            assert floor_sqrt(n - 1) == math.isqrt(n - 1)

    def test_random_wide_values(self):
        rng = random.Random(20241019)
        for _ in range(2000):
            n = rng.getrandbits(rng.randint(1, 512))
            root = floor_sqrt(n)
            assert root * root <= n < (root + 1) * (root + 1)

    def test_beyond_float_precision(self):
        """A float root is wrong here; the integer root is exact."""
        n = (10**30 + 1) ** 2 - 1
        assert floor_sqrt(n) == 10**30


class TestFloorSqrtIterationBound:
    """Iteration bound handling."""

    def test_exhausted_bound_raises(self):
        with pytest.raises(SqrtDidNotConverge) as exc_info:
            floor_sqrt(10**100, max_iterations=1)
        assert "did not converge" in str(exc_info.value)

    def test_not_converged_is_arithmetic_overflow(self):
        assert issubclass(SqrtDidNotConverge, ArithmeticOverflow)

    def test_512_bit_converges_quickly(self):
        assert floor_sqrt(UINT512_MAX, max_iterations=16) == 2**256 - 1
