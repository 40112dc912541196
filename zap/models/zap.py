"""Pydantic models for zap requests and responses.

Amounts travel as decimal strings so that uint256 values survive JSON
round-trips without precision loss.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from zap.config import ZapConfig
from zap.constants import DEFAULT_FEE, DEFAULT_FEE_EXTENSION
from zap.models.types import Uint256
from zap.optimal_swap import SwapResult, compute_optimal_swap


class ZapRequest(BaseModel):
    """A deposit to balance against a pool before adding liquidity."""

    amount_a: Uint256 = Field(alias="amountA", description="Caller's amount of asset A")
    amount_b: Uint256 = Field(alias="amountB", description="Caller's amount of asset B")
    reserve_a: Uint256 = Field(alias="reserveA", description="Pool reserve of asset A")
    reserve_b: Uint256 = Field(alias="reserveB", description="Pool reserve of asset B")
    fee: Uint256 = Field(default=str(DEFAULT_FEE), description="Fee numerator")
    extension: Uint256 = Field(
        default=str(DEFAULT_FEE_EXTENSION),
        description="Fee denominator (fee / extension is the fee fraction)",
    )

    model_config = {"populate_by_name": True}

    def solve(self, config: ZapConfig | None = None) -> ZapResponse:
        """Run the optimal-swap computation for this request.

        Wire values are capped at uint256 during validation whatever
        `config.word_bits` is. A wider word only widens the intermediates; a
        narrower word rejects inputs that do not fit it with ArithmeticOverflow.

        Raises:
            ZapError: Any solver error (invalid parameters, overflow, ...)
        """
        result = compute_optimal_swap(
            int(self.amount_a),
            int(self.amount_b),
            int(self.reserve_a),
            int(self.reserve_b),
            int(self.fee),
            int(self.extension),
            config=config,
        )
        return ZapResponse.from_result(result)


class ZapResponse(BaseModel):
    """The swap to perform before depositing."""

    reversed: bool = Field(description="True when asset B is swapped into A")
    swap_asset: Literal["a", "b"] = Field(alias="swapAsset", description="Asset to swap")
    swap_amount: Uint256 = Field(alias="swapAmount", description="Amount to swap")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_result(cls, result: SwapResult) -> ZapResponse:
        return cls(
            reversed=result.reversed,
            swap_asset=result.swap_asset,
            swap_amount=str(result.swap_amount),
        )

    def to_result(self) -> SwapResult:
        return SwapResult(reversed=self.reversed, swap_amount=int(self.swap_amount))
