"""Checked fixed-width arithmetic.

The solver works in two widths: a native word (256 bits by default) for
inputs, coefficients and the result, and a double-width word for the few
products that can outgrow the native one (b^2, 4*a*|c|*extension, the
c components and the direction cross-products). Each helper multiplies or
adds step by step and range-checks every partial result, so a value that
would wrap in a fixed-width implementation raises ArithmeticOverflow at the
step that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass

from zap.errors import ArithmeticOverflow
from zap.safe_int import S, SafeInt, uint_max


@dataclass(frozen=True)
class IntWidth:
    """An unsigned integer width with checked operations.

    Attributes:
        bits: Width in bits (e.g. 256 for uint256)
    """

    bits: int

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"Integer width must be positive, got {self.bits}")

    @property
    def max(self) -> int:
        return uint_max(self.bits)

    @property
    def double(self) -> IntWidth:
        """The double-width counterpart used for widened products."""
        return IntWidth(self.bits * 2)

    def check(self, value: SafeInt | int, name: str = "value") -> SafeInt:
        """Return value as SafeInt if it fits this width.

        Raises:
            ArithmeticOverflow: If value is negative or exceeds 2^bits - 1
        """
        v = S(value)
        if not v.fits(self.bits):
            raise ArithmeticOverflow(f"{name} does not fit uint{self.bits}: {v.value}")
        return v

    def mul(self, *factors: SafeInt | int, name: str = "product") -> SafeInt:
        """Multiply factors left to right, checking every partial product."""
        if not factors:
            raise ValueError("mul() requires at least one factor")
        result = self.check(factors[0], name)
        for factor in factors[1:]:
            result = self.check(result * self.check(factor, name), name)
        return result

    def add(self, *terms: SafeInt | int, name: str = "sum") -> SafeInt:
        """Add terms left to right, checking every partial sum."""
        result = S(0)
        for term in terms:
            result = self.check(result + self.check(term, name), name)
        return result


UINT256 = IntWidth(256)
UINT512 = IntWidth(512)
