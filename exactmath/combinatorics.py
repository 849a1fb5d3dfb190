"""
Factorials and binomial coefficients.

Exact results come in two widths:
  - factorial_exact_integer: int64, so |n| <= 20 (21! > 2**63 - 1)
  - factorial_exact_big:     Python int, unbounded

The float helpers (approximate_factorial, log_gamma, log_factorial) cover
arguments beyond the exact range.
"""

import math
import warnings
from typing import Any, Optional

from .domains import BIG, INT64, Integer, IntegerDomain, domain_for
from .errors import InvalidArgument

MAX_INT64_FACTORIAL = 20

# log(sys.float_info.max)
_LOG_FLOAT_MAX = 709.782712893384


def _signed_factorial(d: IntegerDomain, n):
    """|n|! in domain d, negated for negative n."""
    result = d.one
    with d.guard():
        for i in range(2, int(d.abs(n)) + 1):
            result = result * d.coerce(i)
        return -result if n < 0 else result


def factorial_exact_integer(n: Integer):
    """Exact n! as an int64, for |n| <= 20.

    Negative n gives -(|n|!).  Anything outside [-20, 20] is rejected rather
    than allowed to overflow.
    """
    n = BIG.coerce(n)
    if abs(n) > MAX_INT64_FACTORIAL:
        raise InvalidArgument(
            f"factorial_exact_integer supports |n| <= {MAX_INT64_FACTORIAL}, got {n}"
        )
    return _signed_factorial(INT64, INT64.coerce(n))


def factorial_exact_big(n: Integer) -> int:
    """Exact n! as a Python int; negative n gives -(|n|!)."""
    return _signed_factorial(BIG, BIG.coerce(n))


def approximate_factorial(n) -> float:
    """n! as a float.

    Exact for n <= 20, Stirling's series with two correction terms beyond.
    Returns inf (with a RuntimeWarning) once n! exceeds the float64 range,
    i.e. for n > 170.
    """
    n = BIG.coerce(n)
    if n < 0:
        raise InvalidArgument(f"approximate_factorial needs n >= 0, got {n}")
    if n <= MAX_INT64_FACTORIAL:
        return float(factorial_exact_integer(n))

    x = float(n)
    log_value = (0.5 * math.log(2.0 * math.pi * x) + x * (math.log(x) - 1.0)
                 + 1.0 / (12.0 * x) - 1.0 / (360.0 * x ** 3))
    if log_value > _LOG_FLOAT_MAX:
        warnings.warn(
            f"approximate_factorial({n}) overflows float64; returning inf. "
            "Use log_factorial or factorial_exact_big instead.",
            RuntimeWarning,
        )
        return math.inf
    return math.exp(log_value)


def log_gamma(x: float) -> float:
    """Natural log of the gamma function for x > 0."""
    if not x > 0:
        raise InvalidArgument(f"log_gamma needs x > 0, got {x}")
    return math.lgamma(x)


def log_factorial(n) -> float:
    """log(n!) for n >= 0, usable far beyond the float64 range of n!."""
    n = BIG.coerce(n)
    if n < 0:
        raise InvalidArgument(f"log_factorial needs n >= 0, got {n}")
    return log_gamma(n + 1.0)


def binom(n: Integer, k: Integer, domain: Optional[Any] = None):
    """Exact binomial coefficient C(n, k); 0 when k > n.

    Computed in arbitrary precision with the multiplicative formula, then
    converted to the requested domain (ArithmeticOverflow if it does not fit).
    """
    d = domain_for(n, k, domain=domain)
    n, k = BIG.coerce(n), BIG.coerce(k)
    if n < 0 or k < 0:
        raise InvalidArgument(f"binom needs n >= 0 and k >= 0, got n={n}, k={k}")
    if k > n:
        return d.zero

    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        # exact: result is C(n - k + i - 1, i - 1) before this step
        result = result * (n - k + i) // i
    return d.coerce(result)
