"""Optimal one-sided swap solver for constant-product AMM deposits."""

from zap.config import DEFAULT_ZAP_CONFIG, ZapConfig
from zap.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    InvalidAmount,
    InvalidParameter,
    ZapError,
)
from zap.optimal_swap import (
    DepositAmounts,
    FeeSpec,
    OptimalSwapSolver,
    PoolReserves,
    SwapResult,
    compute_optimal_swap,
)

__version__ = "0.1.0"
__all__ = [
    "compute_optimal_swap",
    "OptimalSwapSolver",
    "PoolReserves",
    "DepositAmounts",
    "FeeSpec",
    "SwapResult",
    "ZapConfig",
    "DEFAULT_ZAP_CONFIG",
    "ZapError",
    "InvalidParameter",
    "InvalidAmount",
    "ArithmeticOverflow",
    "DivisionByZero",
    "__version__",
]
