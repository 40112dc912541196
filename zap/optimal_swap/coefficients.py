"""Quadratic coefficients for the optimal one-sided swap.

Swapping s units of A through a constant-product pool with fee
fee / extension returns

    out(s) = s * net * rb / (ra * extension + s * net),   net = extension - fee

Requiring the leftover deposit (x - s, y + out) to match the post-swap
reserves (ra + s, rb - out) and clearing denominators gives

    a * s^2 + b * s + extension * (c1 - c2) = 0

with
    a  = (y + rb) * net
    b  = (extension + net) * (k + ra * y),   k = ra * rb
    c1 = y * ra * ra
    c2 = x * k

Every term is a product of non-negative quantities. The constant term's
sign depends on the inputs, so it is carried as the two magnitudes c1, c2.
"""

from __future__ import annotations

from dataclasses import dataclass

from zap.math.wide import IntWidth
from zap.optimal_swap.types import DepositAmounts, FeeSpec, PoolReserves
from zap.safe_int import S


@dataclass(frozen=True)
class QuadraticCoefficients:
    """Coefficients of a*s^2 + b*s + extension*(c1 - c2) = 0.

    a and b fit the native word; c1 and c2 are double-width.
    """

    a: int
    b: int
    c1: int
    c2: int
    extension: int

    @property
    def c_non_negative(self) -> bool:
        """True when c1 >= c2, i.e. the constant term is not negative."""
        return self.c1 >= self.c2


def build_coefficients(
    amounts: DepositAmounts,
    reserves: PoolReserves,
    fee: FeeSpec,
    word: IntWidth,
) -> QuadraticCoefficients:
    """Build the quadratic for oriented inputs (A is the excess side).

    Args:
        amounts: Oriented deposit amounts (x = amount_a, y = amount_b)
        reserves: Oriented pool reserves (ra, rb)
        fee: Fee fraction
        word: Native width; c1 and c2 use its double

    Returns:
        QuadraticCoefficients

    Raises:
        ArithmeticOverflow: If any intermediate does not fit its width
    """
    wide = word.double
    x, y = amounts.amount_a, amounts.amount_b
    ra, rb = reserves.reserve_a, reserves.reserve_b
    extension = word.check(fee.extension, "extension")

    # FeeSpec guarantees extension > fee
    net = extension - S(fee.fee)
    k = word.mul(ra, rb, name="k")
    ra_y = word.mul(ra, y, name="reserve_a * amount_b")

    a = word.mul(word.add(y, rb, name="amount_b + reserve_b"), net, name="a")
    b = word.mul(
        word.add(extension, net, name="extension + net"),
        word.add(k, ra_y, name="k + reserve_a * amount_b"),
        name="b",
    )
    c1 = wide.mul(y, ra, ra, name="c1")
    c2 = wide.mul(x, k, name="c2")

    return QuadraticCoefficients(
        a=a.value,
        b=b.value,
        c1=c1.value,
        c2=c2.value,
        extension=extension.value,
    )
