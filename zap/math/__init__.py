"""Mathematical utilities for the zap solver.

This package provides the integer primitives the solver is built on:
- IntWidth: checked fixed-width multiplication and addition
- floor_sqrt: exact integer square root (Newton's method)
"""

from zap.math.sqrt import SQRT_MAX_ITERATIONS, floor_sqrt
from zap.math.wide import UINT256, UINT512, IntWidth

__all__ = ["IntWidth", "UINT256", "UINT512", "floor_sqrt", "SQRT_MAX_ITERATIONS"]
