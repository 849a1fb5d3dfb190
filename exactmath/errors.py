"""
Exception taxonomy for exactmath.

Every precondition is checked before any arithmetic is done, so a raised
error never leaves a partial result behind.
"""


class ExactMathError(Exception):
    """Base class for all toolkit errors."""


class InvalidArgument(ExactMathError, ValueError):
    """An input violates an operation's precondition."""


class NotInvertible(ExactMathError, ArithmeticError):
    """A modular inverse was requested for non-coprime arguments."""


class ArithmeticOverflow(ExactMathError, OverflowError):
    """A value does not fit the fixed-width integer domain in use."""
