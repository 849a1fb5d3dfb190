"""
exactmath: exact number-theoretic primitives over fixed-width and
arbitrary-precision integers.

Core algorithms (each written once, run in either integer domain):
  mod_floor(v, m)        canonical residue in [0, m)
  extgcd(a, b)           Bezout coefficients, u*a + v*b = gcd(a, b) >= 0
  pow_mod(b, e, m)       square-and-multiply exponentiation
  inverse_mod(a, m)      modular inverse via extgcd
  convergent(f, bound)   continued-fraction convergent with |den| <= bound

Plain Python ints run in arbitrary precision (configurable); numpy integer
scalars run in the fixed-width domain of their dtype.  Pass ``domain=`` to
choose explicitly.
"""

__version__ = "0.1.0"

from .errors import (
    ExactMathError, InvalidArgument, NotInvertible, ArithmeticOverflow,
)
from .domains import (
    Integer, IntegerDomain, FixedWidthDomain, BigIntegerDomain,
    BIG, INT64, INT32, get_domain, domain_for,
)
from .config import ToolkitConfig, load_config, get_config, set_config, default_domain
from .rational import Fraction
from .modular import mod_floor, pow_mod, inverse_mod
from .euclid import extgcd, gcd, is_coprime, convergent, convergents
from .basic import bit_length, sign, abs_value, minimum, maximum
from .combinatorics import (
    factorial_exact_integer, factorial_exact_big, approximate_factorial,
    log_gamma, log_factorial, binom,
)
from .real import lg, arccosh, arcsinh, arctanh, real_mod
from .norms import p_norm, squared_norm, p_normalized

__all__ = [
    "ExactMathError", "InvalidArgument", "NotInvertible", "ArithmeticOverflow",
    "Integer", "IntegerDomain", "FixedWidthDomain", "BigIntegerDomain",
    "BIG", "INT64", "INT32", "get_domain", "domain_for",
    "ToolkitConfig", "load_config", "get_config", "set_config", "default_domain",
    "Fraction",
    "mod_floor", "pow_mod", "inverse_mod",
    "extgcd", "gcd", "is_coprime", "convergent", "convergents",
    "bit_length", "sign", "abs_value", "minimum", "maximum",
    "factorial_exact_integer", "factorial_exact_big", "approximate_factorial",
    "log_gamma", "log_factorial", "binom",
    "lg", "arccosh", "arcsinh", "arctanh", "real_mod",
    "p_norm", "squared_norm", "p_normalized",
]
