"""Configuration for the zap solver."""

import os
from dataclasses import dataclass

from zap.constants import DEFAULT_WORD_BITS
from zap.math.sqrt import SQRT_MAX_ITERATIONS
from zap.math.wide import IntWidth


@dataclass(frozen=True)
class ZapConfig:
    """Numeric configuration for the optimal-swap computation.

    Attributes:
        word_bits: Native unsigned width for inputs, coefficients and the
            result. Widened products use twice this width.
        sqrt_max_iterations: Iteration bound for the integer square root.
    """

    word_bits: int = DEFAULT_WORD_BITS
    sqrt_max_iterations: int = SQRT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.word_bits < 8 or self.word_bits % 8 != 0:
            raise ValueError(f"word_bits must be a positive multiple of 8, got {self.word_bits}")
        if self.sqrt_max_iterations <= 0:
            raise ValueError(
                f"sqrt_max_iterations must be positive, got {self.sqrt_max_iterations}"
            )

    @property
    def word(self) -> IntWidth:
        return IntWidth(self.word_bits)

    @property
    def wide(self) -> IntWidth:
        return self.word.double

    @classmethod
    def from_env(cls) -> "ZapConfig":
        """Build a config from environment variables.

        - ZAP_WORD_BITS: native word width (default: 256)
        - ZAP_SQRT_MAX_ITERATIONS: square-root iteration bound (default: 255)
        """
        return cls(
            word_bits=int(os.environ.get("ZAP_WORD_BITS", str(DEFAULT_WORD_BITS))),
            sqrt_max_iterations=int(
                os.environ.get("ZAP_SQRT_MAX_ITERATIONS", str(SQRT_MAX_ITERATIONS))
            ),
        )


# Default configuration instance
DEFAULT_ZAP_CONFIG = ZapConfig()
