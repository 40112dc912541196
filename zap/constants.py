"""Numeric defaults for the zap solver."""

# Native word width for inputs, coefficients and results (uint256)
DEFAULT_WORD_BITS = 256

# Default fee tier: 3 / 1000 = 0.3% (UniswapV2)
DEFAULT_FEE = 3
DEFAULT_FEE_EXTENSION = 1000

# Basis-point denominator for FeeSpec.from_bps()
BPS_EXTENSION = 10_000
