"""Exact integer square root.

floor_sqrt() computes floor(sqrt(n)) with Newton's (Babylonian) method in
pure integer arithmetic. A floating-point root is off by more than one unit
for values beyond 2^53, which would corrupt the swap amount directly.

Algorithm:
    1. Initial guess: x = 2^ceil(bit_length(n) / 2), always >= sqrt(n)
    2. Iterate x' = (x + n // x) // 2 while the estimate keeps decreasing
    3. The first non-decreasing step leaves x = floor(sqrt(n))

Starting above the root makes the sequence monotonically decreasing, so the
stop condition is exact; the initial guess is within a factor of two of
the root, so a 512-bit input converges in well under 20 steps.
"""

from __future__ import annotations

from zap.errors import SqrtDidNotConverge
from zap.safe_int import S, SafeInt

# Maximum iterations for Newton convergence
SQRT_MAX_ITERATIONS = 255


def floor_sqrt(value: SafeInt | int, max_iterations: int = SQRT_MAX_ITERATIONS) -> int:
    """Return the largest integer whose square does not exceed value.

    Args:
        value: Non-negative integer (any width)
        max_iterations: Upper bound on Newton steps

    Returns:
        floor(sqrt(value))

    Raises:
        ValueError: If value is negative
        SqrtDidNotConverge: If the iteration bound is exhausted
    """
    n = S(value).value
    if n < 0:
        raise ValueError(f"Square root of negative value: {n}")
    if n < 2:
        return n

    x = 1 << ((n.bit_length() + 1) // 2)
    for _ in range(max_iterations):
        y = (x + n // x) // 2
        if y >= x:
            return x
        x = y

    raise SqrtDidNotConverge(
        f"Integer square root did not converge after {max_iterations} iterations"
    )
