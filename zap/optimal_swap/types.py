"""Value types for the optimal-swap computation.

All types are immutable and validate their own invariants on construction,
so a solver that receives them can rely on positive reserves, a non-zero
deposit and a fee strictly below its extension.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from zap.constants import BPS_EXTENSION, DEFAULT_FEE, DEFAULT_FEE_EXTENSION
from zap.errors import InvalidAmount, InvalidParameter


def _require_uint(name: str, value: object, error: type[ValueError]) -> int:
    """Check that value is a non-negative int (bool excluded)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise error(f"{name} cannot be negative: {value}")
    return value


@dataclass(frozen=True)
class PoolReserves:
    """Current pool balances; k = reserve_a * reserve_b."""

    reserve_a: int
    reserve_b: int

    def __post_init__(self) -> None:
        _require_uint("reserve_a", self.reserve_a, InvalidParameter)
        _require_uint("reserve_b", self.reserve_b, InvalidParameter)
        if self.reserve_a == 0 or self.reserve_b == 0:
            raise InvalidParameter(
                f"Pool reserves must be positive: reserve_a={self.reserve_a}, "
                f"reserve_b={self.reserve_b}"
            )

    def flipped(self) -> PoolReserves:
        return PoolReserves(reserve_a=self.reserve_b, reserve_b=self.reserve_a)


@dataclass(frozen=True)
class DepositAmounts:
    """Amounts the caller wants to deposit, generally not in pool ratio."""

    amount_a: int
    amount_b: int

    def __post_init__(self) -> None:
        _require_uint("amount_a", self.amount_a, InvalidAmount)
        _require_uint("amount_b", self.amount_b, InvalidAmount)
        if self.amount_a == 0 and self.amount_b == 0:
            raise InvalidAmount("Deposit amounts cannot both be zero")

    def flipped(self) -> DepositAmounts:
        return DepositAmounts(amount_a=self.amount_b, amount_b=self.amount_a)


@dataclass(frozen=True)
class FeeSpec:
    """Integer fee fraction fee / extension.

    For fee=3, extension=1000 the pool keeps 0.3% of every swap input and
    net = 997 is the retained numerator. A larger extension gives finer fee
    resolution at the cost of larger intermediate products.
    """

    fee: int = DEFAULT_FEE
    extension: int = DEFAULT_FEE_EXTENSION

    def __post_init__(self) -> None:
        _require_uint("fee", self.fee, InvalidParameter)
        _require_uint("extension", self.extension, InvalidParameter)
        if self.extension <= self.fee:
            raise InvalidParameter(
                f"Fee extension must exceed fee: fee={self.fee}, extension={self.extension}"
            )

    @property
    def net(self) -> int:
        """Retained numerator (extension - fee), always positive."""
        return self.extension - self.fee

    @classmethod
    def from_bps(cls, fee_bps: int) -> FeeSpec:
        """Build a fee spec from basis points (30 = 0.3%)."""
        return cls(fee=fee_bps, extension=BPS_EXTENSION)


@dataclass(frozen=True)
class SwapResult:
    """Which asset to swap before depositing, and how much of it.

    Attributes:
        reversed: True when the amount is of asset B (swap B into A)
        swap_amount: Amount of the swapped asset, rounded down
    """

    reversed: bool
    swap_amount: int

    @property
    def swap_asset(self) -> Literal["a", "b"]:
        return "b" if self.reversed else "a"
