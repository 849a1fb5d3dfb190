"""
Real-valued helpers: base-2 logarithm, inverse hyperbolic functions and a
periodic floating-point modulus.
"""

import math

import numpy as np

from .errors import InvalidArgument


def lg(x: float) -> float:
    """log2(x) for x > 0."""
    if not x > 0:
        raise InvalidArgument(f"lg needs x > 0, got {x}")
    return float(np.log2(x))


def arccosh(x: float) -> float:
    if not x >= 1.0:
        raise InvalidArgument(f"arccosh needs x >= 1, got {x}")
    return float(np.arccosh(x))


def arcsinh(x: float) -> float:
    return float(np.arcsinh(x))


def arctanh(x: float) -> float:
    if not -1.0 < x < 1.0:
        raise InvalidArgument(f"arctanh needs -1 < x < 1, got {x}")
    return float(np.arctanh(x))


def real_mod(value: float, period: float, min_value: float) -> float:
    """Shift ``value`` by a multiple of ``period`` into [min_value, min_value + period).

    Useful for wrapping angles, e.g. real_mod(theta, 2*pi, -pi).
    """
    if not period > 0:
        raise InvalidArgument(f"period must be positive, got {period}")
    offset = (value - min_value) / period
    return period * (offset - math.floor(offset)) + min_value
