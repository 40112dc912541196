"""Optimal one-sided swap for constant-product pools."""

from zap.optimal_swap.coefficients import QuadraticCoefficients, build_coefficients
from zap.optimal_swap.direction import Orientation, normalize_direction
from zap.optimal_swap.solver import (
    OptimalSwapSolver,
    compute_optimal_swap,
    discriminant,
    optimal_swap_solver,
    positive_root,
)
from zap.optimal_swap.types import DepositAmounts, FeeSpec, PoolReserves, SwapResult

__all__ = [
    # Value types
    "PoolReserves",
    "DepositAmounts",
    "FeeSpec",
    "SwapResult",
    # Pipeline stages
    "Orientation",
    "normalize_direction",
    "QuadraticCoefficients",
    "build_coefficients",
    "discriminant",
    "positive_root",
    # Solver
    "OptimalSwapSolver",
    "optimal_swap_solver",
    "compute_optimal_swap",
]
