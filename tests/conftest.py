"""Pytest configuration and fixtures."""

import pytest

from zap.config import ZapConfig
from zap.optimal_swap import FeeSpec, OptimalSwapSolver, PoolReserves


@pytest.fixture
def default_fee() -> FeeSpec:
    """The 0.3% fee tier (3 / 1000)."""
    return FeeSpec(fee=3, extension=1000)


@pytest.fixture
def weth_usdc_reserves() -> PoolReserves:
    """A WETH/USDC-like pool: 10,000 WETH (18 decimals) against 25M USDC (6 decimals)."""
    return PoolReserves(reserve_a=10_000 * 10**18, reserve_b=25_000_000 * 10**6)


@pytest.fixture
def narrow_solver() -> OptimalSwapSolver:
    """A solver with a 64-bit word (128-bit widened products)."""
    return OptimalSwapSolver(ZapConfig(word_bits=64))
