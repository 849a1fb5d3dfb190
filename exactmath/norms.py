"""
p-norms of real vectors.

Vectors are anything numpy can turn into a 1-D float64 array.
"""

import numpy as np

from .errors import InvalidArgument


def _as_vector(vector) -> np.ndarray:
    x = np.asarray(vector, dtype=np.float64)
    if x.ndim != 1:
        raise InvalidArgument(f"Expected a 1-D vector, got shape {x.shape}")
    return x


def p_norm(p: float, vector) -> float:
    """(sum |x_i|**p) ** (1/p), for p >= 1."""
    if not p >= 1.0:
        raise InvalidArgument(f"p-norm needs p >= 1.0, got {p}")
    x = _as_vector(vector)
    return float(np.sum(np.abs(x) ** p) ** (1.0 / p))


def squared_norm(vector) -> float:
    """sum x_i**2, the squared 2-norm."""
    x = _as_vector(vector)
    return float(np.dot(x, x))


def p_normalized(p: float, vector) -> np.ndarray:
    """``vector`` divided by its p-norm.

    A vector whose norm is exactly 0 is returned unchanged (as a float array)
    instead of being divided by zero.
    """
    x = _as_vector(vector)
    norm = p_norm(p, x)
    if norm == 0.0:
        return x
    return x / norm
