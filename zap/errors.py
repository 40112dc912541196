"""Error classes for the zap solver.

Every error is terminal for the call that raised it: the solver either
returns a complete SwapResult or raises one of these.
"""


class ZapError(Exception):
    """Base error for zap solver operations."""

    pass


class InvalidParameter(ZapError, ValueError):
    """Malformed pool or fee configuration (zero reserve, extension <= fee)."""

    pass


class InvalidAmount(ZapError, ValueError):
    """Degenerate deposit request (both amounts zero, negative amount)."""

    pass


class ArithmeticOverflow(ZapError, ArithmeticError):
    """An intermediate value does not fit the working integer width."""

    pass


class Underflow(ArithmeticOverflow):
    """Unsigned subtraction would produce a negative result."""

    pass


class SqrtDidNotConverge(ArithmeticOverflow):
    """Newton iteration for the integer square root hit its iteration bound."""

    pass


class DivisionByZero(ZapError, ZeroDivisionError):
    """Division by a zero coefficient."""

    pass


__all__ = [
    "ZapError",
    "InvalidParameter",
    "InvalidAmount",
    "ArithmeticOverflow",
    "Underflow",
    "SqrtDidNotConverge",
    "DivisionByZero",
]
