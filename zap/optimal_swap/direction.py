"""Swap direction normalization.

The quadratic is always derived with asset A as the side in excess. When
the caller's deposit holds relatively more B than the pool does, the two
sides are exchanged before the derivation and the result is reported as
reversed.
"""

from __future__ import annotations

from dataclasses import dataclass

from zap.math.wide import IntWidth
from zap.optimal_swap.types import DepositAmounts, PoolReserves


@dataclass(frozen=True)
class Orientation:
    """Deposit and reserves oriented so that asset A is the excess side."""

    amounts: DepositAmounts
    reserves: PoolReserves
    reversed: bool


def normalize_direction(
    amounts: DepositAmounts,
    reserves: PoolReserves,
    wide: IntWidth,
) -> Orientation:
    """Orient the deposit so that A is the asset to swap.

    Compares amount_a / amount_b with reserve_a / reserve_b by
    cross-multiplication: integer division truncates and can flip the
    comparison (or collapse a ratio to zero).

    Args:
        amounts: Caller's deposit amounts
        reserves: Current pool reserves
        wide: Width used for the cross-products

    Returns:
        Orientation with A as the excess side

    Raises:
        ArithmeticOverflow: If a cross-product does not fit `wide`
    """
    if amounts.amount_b == 0:
        return Orientation(amounts=amounts, reserves=reserves, reversed=False)

    lhs = wide.mul(reserves.reserve_a, amounts.amount_b, name="reserve_a * amount_b")
    rhs = wide.mul(reserves.reserve_b, amounts.amount_a, name="reserve_b * amount_a")
    if lhs > rhs:
        return Orientation(amounts=amounts.flipped(), reserves=reserves.flipped(), reversed=True)
    return Orientation(amounts=amounts, reserves=reserves, reversed=False)
