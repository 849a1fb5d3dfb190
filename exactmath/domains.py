"""
Integer domains for the exact-arithmetic algorithms.

Every integer algorithm in exactmath is written once against the small
interface below and runs unchanged in either representation:

  - FixedWidthDomain: numpy signed integer scalars (int64 by default).
    Inputs must fit the width for the whole computation.  Out-of-range
    inputs and overflowing scalar arithmetic raise ArithmeticOverflow.
  - BigIntegerDomain: Python ints, arbitrary precision, never overflow.

Arithmetic uses the ordinary operators (+, -, *, comparisons).  The domain
supplies what differs between representations: coercion, truncating
division and remainder, sign, absolute value and the overflow guard.
"""

import contextlib
import functools
import operator
from typing import Any, Dict, Iterator, Optional, Union

import numpy as np

from .errors import ArithmeticOverflow, InvalidArgument

# A value of either domain: Python int or numpy signed integer scalar
Integer = Union[int, np.integer]


class IntegerDomain:
    """Interface shared by the fixed-width and arbitrary-precision domains."""

    name = "abstract"
    bits: Optional[int] = None

    def coerce(self, value: Any):
        raise NotImplementedError

    def guard(self):
        """Context manager wrapping a block of arithmetic in this domain."""
        return contextlib.nullcontext()

    def quot(self, a, b):
        """Quotient rounded toward zero."""
        raise NotImplementedError

    def rem(self, a, b):
        """Remainder of truncating division; carries the sign of ``a``."""
        raise NotImplementedError

    def sign(self, a):
        raise NotImplementedError

    def abs(self, a):
        raise NotImplementedError

    @property
    def zero(self):
        return self.coerce(0)

    @property
    def one(self):
        return self.coerce(1)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def _as_index(value: Any) -> int:
    """Convert any exact integer (int, bool, numpy integer) to a Python int."""
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(
            f"Expected an integer, got {type(value).__name__}: {value!r}"
        ) from None


# ---------------------------------------------------------------------------
# Arbitrary precision
# ---------------------------------------------------------------------------

class BigIntegerDomain(IntegerDomain):
    """Python ints."""

    name = "big"

    def coerce(self, value: Any) -> int:
        return _as_index(value)

    def quot(self, a: int, b: int) -> int:
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q

    def rem(self, a: int, b: int) -> int:
        return a - b * self.quot(a, b)

    def sign(self, a: int) -> int:
        return (a > 0) - (a < 0)

    def abs(self, a: int) -> int:
        return -a if a < 0 else a


# ---------------------------------------------------------------------------
# Fixed width
# ---------------------------------------------------------------------------

class FixedWidthDomain(IntegerDomain):
    """Signed numpy integer scalars of one dtype.

    Args:
        dtype: Any signed numpy integer dtype (np.int64, "int32", ...).
        check_overflow: If True, arithmetic inside ``guard()`` runs under
            ``np.errstate(over="raise")`` and overflow surfaces as
            ArithmeticOverflow.  If False numpy's default behaviour applies
            (wrap around with a RuntimeWarning).
    """

    def __init__(self, dtype=np.int64, check_overflow: bool = True):
        self.dtype = np.dtype(dtype)
        if self.dtype.kind != "i":
            raise InvalidArgument(
                f"Fixed-width domains need a signed integer dtype, got {self.dtype}"
            )
        info = np.iinfo(self.dtype)
        self.bits = info.bits
        self.min_value = int(info.min)
        self.max_value = int(info.max)
        self.check_overflow = check_overflow
        self.name = self.dtype.name

    def fits(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def coerce(self, value: Any):
        if isinstance(value, np.integer) and value.dtype == self.dtype:
            return value
        v = _as_index(value)
        if not self.fits(v):
            raise ArithmeticOverflow(
                f"{v} does not fit in {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return self.dtype.type(v)

    @contextlib.contextmanager
    def guard(self) -> Iterator[None]:
        if not self.check_overflow:
            yield
            return
        with np.errstate(over="raise"):
            try:
                yield
            except FloatingPointError as exc:
                raise ArithmeticOverflow(f"{self.name} overflow: {exc}") from exc

    def quot(self, a, b):
        q = a // b
        # numpy floors; step back toward zero when the signs differ and
        # the division is inexact
        if (a < 0) != (b < 0) and q * b != a:
            q += 1
        return q

    def rem(self, a, b):
        return np.fmod(a, b)

    def sign(self, a):
        return np.sign(a)

    def abs(self, a):
        if self.check_overflow and a == self.min_value:
            raise ArithmeticOverflow(f"|{a}| does not fit in {self.name}")
        return np.abs(a)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

BIG = BigIntegerDomain()
INT64 = FixedWidthDomain(np.int64)
INT32 = FixedWidthDomain(np.int32)

_FIXED_NAMES = ("int8", "int16", "int32", "int64")


@functools.lru_cache(maxsize=None)
def _fixed_domain(name: str, check_overflow: bool) -> FixedWidthDomain:
    if check_overflow and name == "int64":
        return INT64
    if check_overflow and name == "int32":
        return INT32
    return FixedWidthDomain(np.dtype(name), check_overflow=check_overflow)


def get_domain(name: str, check_overflow: bool = True) -> IntegerDomain:
    """Look up a domain by name ("big", "int64", "int32", ...).

    Raises:
        KeyError if name is not a known domain.
    """
    if name == BIG.name:
        return BIG
    if name in _FIXED_NAMES:
        return _fixed_domain(name, check_overflow)
    raise KeyError(
        f"Unknown integer domain '{name}'. "
        f"Available: {[BIG.name, *_FIXED_NAMES]}"
    )


def domain_for(*values: Any, domain: Optional[Any] = None) -> IntegerDomain:
    """Pick the domain an operation on ``values`` should run in.

    An explicit ``domain`` (object or name) wins.  Otherwise numpy integer
    inputs select the fixed-width domain of their (promoted) dtype, and
    anything else falls back to the configured default domain.
    """
    from .config import get_config, default_domain

    if isinstance(domain, IntegerDomain):
        return domain
    if domain is not None:
        try:
            return get_domain(domain, check_overflow=get_config().check_overflow)
        except KeyError as exc:
            raise InvalidArgument(exc.args[0]) from None

    dtypes = [v.dtype for v in values if isinstance(v, np.integer)]
    if dtypes:
        promoted = np.result_type(*dtypes)
        if promoted.kind != "i":
            raise InvalidArgument(
                f"Unsigned or mixed-sign integer inputs are not supported: "
                f"{[str(d) for d in dtypes]}"
            )
        return get_domain(promoted.name,
                          check_overflow=get_config().check_overflow)
    return default_domain()


def describe(domain: IntegerDomain) -> Dict[str, Any]:
    """Summary of a domain's limits, for reports."""
    if isinstance(domain, FixedWidthDomain):
        return {
            "name": domain.name,
            "bits": domain.bits,
            "min": domain.min_value,
            "max": domain.max_value,
            "check_overflow": domain.check_overflow,
        }
    return {"name": domain.name, "bits": None, "min": None, "max": None,
            "check_overflow": False}
