"""Test helpers module for shared test utilities.

- reference: independent arbitrary-precision solver and swap simulator
"""

from tests.helpers.reference import apply_swap, get_amount_out, reference_swap, swap_excess

__all__ = ["reference_swap", "get_amount_out", "apply_swap", "swap_excess"]
