"""Optimal one-sided swap before a two-sided deposit.

Given pool reserves, a deposit that is not in pool ratio and the pool fee,
the solver returns which asset to swap and how much of it so that the
remaining pair matches the post-swap reserve ratio.

Pipeline: validate -> orient (A is the excess side) -> quadratic
coefficients -> unsigned discriminant -> integer root -> amount.

The amount is rounded down: the caller deposits a small one-sided surplus
instead of running into a deficit.
"""

from __future__ import annotations

import structlog

from zap.config import DEFAULT_ZAP_CONFIG, ZapConfig
from zap.errors import DivisionByZero, ZapError
from zap.math.sqrt import floor_sqrt
from zap.optimal_swap.coefficients import QuadraticCoefficients, build_coefficients
from zap.optimal_swap.direction import normalize_direction
from zap.optimal_swap.types import DepositAmounts, FeeSpec, PoolReserves, SwapResult
from zap.safe_int import S, SafeInt

logger = structlog.get_logger()


def discriminant(coeffs: QuadraticCoefficients, config: ZapConfig = DEFAULT_ZAP_CONFIG) -> SafeInt:
    """Compute b^2 - 4*a*c*extension without a negative intermediate.

    With c = c1 - c2:
    - c1 >= c2: D = b^2 - 4*a*(c1 - c2)*extension
    - c1 <  c2: D = b^2 + 4*a*(c2 - c1)*extension

    Raises:
        Underflow: If c1 >= c2 and the discriminant is negative (no real root)
        ArithmeticOverflow: If a product does not fit the double width
    """
    wide = config.wide
    b_squared = wide.mul(coeffs.b, coeffs.b, name="b^2")
    if coeffs.c_non_negative:
        four_ac = wide.mul(4, coeffs.a, S(coeffs.c1) - coeffs.c2, coeffs.extension, name="4ac")
        return b_squared - four_ac
    four_ac = wide.mul(4, coeffs.a, S(coeffs.c2) - coeffs.c1, coeffs.extension, name="4ac")
    return wide.add(b_squared, four_ac, name="discriminant")


def positive_root(coeffs: QuadraticCoefficients, config: ZapConfig = DEFAULT_ZAP_CONFIG) -> int:
    """Return floor((floor_sqrt(D) - b) / (2a)), the swap amount.

    Raises:
        DivisionByZero: If a == 0
        Underflow: If sqrt(D) < b (the root is negative)
        ArithmeticOverflow: If an intermediate does not fit its width
    """
    word = config.word
    if coeffs.a == 0:
        raise DivisionByZero(f"Quadratic coefficient a is zero (b={coeffs.b})")

    disc = discriminant(coeffs, config)
    root = word.check(floor_sqrt(disc, config.sqrt_max_iterations), "sqrt(discriminant)")
    two_a = word.mul(2, coeffs.a, name="2a")
    return ((root - coeffs.b) // two_a).value


class OptimalSwapSolver:
    """Solver for the optimal swap amount ahead of a proportional deposit.

    The solver is stateless apart from its numeric configuration, so a
    single instance can be shared across threads.
    """

    def __init__(self, config: ZapConfig | None = None) -> None:
        self.config = config or DEFAULT_ZAP_CONFIG

    def solve(
        self,
        amounts: DepositAmounts,
        reserves: PoolReserves,
        fee: FeeSpec,
    ) -> SwapResult:
        """Compute the optimal swap for already-validated value types.

        Args:
            amounts: Caller's deposit amounts
            reserves: Current pool reserves
            fee: Pool fee fraction

        Returns:
            SwapResult; reversed=True means swap `swap_amount` of asset B

        Raises:
            ArithmeticOverflow: If an input or intermediate exceeds its width
            DivisionByZero: If the derived coefficient a is zero
        """
        word = self.config.word
        for name, value in (
            ("amount_a", amounts.amount_a),
            ("amount_b", amounts.amount_b),
            ("reserve_a", reserves.reserve_a),
            ("reserve_b", reserves.reserve_b),
            ("fee", fee.fee),
            ("extension", fee.extension),
        ):
            word.check(value, name)

        orientation = normalize_direction(amounts, reserves, self.config.wide)
        coeffs = build_coefficients(orientation.amounts, orientation.reserves, fee, word)
        swap_amount = positive_root(coeffs, self.config)

        logger.debug(
            "optimal_swap_computed",
            reversed=orientation.reversed,
            swap_amount=str(swap_amount),
            c_non_negative=coeffs.c_non_negative,
        )
        return SwapResult(reversed=orientation.reversed, swap_amount=swap_amount)

    def compute(
        self,
        amount_a: int,
        amount_b: int,
        reserve_a: int,
        reserve_b: int,
        fee: int,
        extension: int,
    ) -> SwapResult:
        """Compute the optimal swap from raw integers.

        Raises:
            InvalidParameter: If extension <= fee or a reserve is zero
            InvalidAmount: If both amounts are zero
            ArithmeticOverflow: If an input or intermediate exceeds its width
            DivisionByZero: If the derived coefficient a is zero
        """
        try:
            fee_spec = FeeSpec(fee=fee, extension=extension)
            reserves = PoolReserves(reserve_a=reserve_a, reserve_b=reserve_b)
            amounts = DepositAmounts(amount_a=amount_a, amount_b=amount_b)
            return self.solve(amounts, reserves, fee_spec)
        except ZapError as err:
            logger.warning(
                "optimal_swap_rejected",
                error=type(err).__name__,
                reason=str(err),
                word_bits=self.config.word_bits,
            )
            raise


# Singleton instance
optimal_swap_solver = OptimalSwapSolver()


def compute_optimal_swap(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    fee: int,
    extension: int,
    *,
    config: ZapConfig | None = None,
) -> SwapResult:
    """Compute which asset to swap, and how much, before a two-sided deposit.

    Args:
        amount_a: Caller's amount of asset A
        amount_b: Caller's amount of asset B
        reserve_a: Pool reserve of asset A
        reserve_b: Pool reserve of asset B
        fee: Fee numerator (3 for 0.3% with extension 1000)
        extension: Fee denominator, must exceed fee
        config: Numeric configuration (default: 256-bit word)

    Returns:
        SwapResult(reversed, swap_amount)

    Raises:
        InvalidParameter: If extension <= fee, reserve_a == 0 or reserve_b == 0
        InvalidAmount: If amount_a == amount_b == 0
        ArithmeticOverflow: If any intermediate exceeds the representable range
        DivisionByZero: If the derived coefficient a is zero
    """
    solver = optimal_swap_solver if config is None else OptimalSwapSolver(config)
    return solver.compute(amount_a, amount_b, reserve_a, reserve_b, fee, extension)
