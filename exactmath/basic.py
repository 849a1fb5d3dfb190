"""
Small integer and sequence helpers: bit length, sign, absolute value,
minimum and maximum.
"""

from typing import Any, Iterable, Optional

from .domains import Integer, domain_for
from .errors import InvalidArgument


def bit_length(n: Integer, domain: Optional[Any] = None) -> int:
    """Smallest k with n < 2**k, for n >= 0.

    >>> bit_length(0), bit_length(255), bit_length(256)
    (0, 8, 9)
    """
    d = domain_for(n, domain=domain)
    n = d.coerce(n)
    if n < 0:
        raise InvalidArgument(f"bit_length needs a non-negative integer, got {n}")

    k = 0
    while n > 0:
        n = d.quot(n, 2)
        k += 1
    return k


def sign(n: Integer, domain: Optional[Any] = None) -> Integer:
    """-1, 0 or 1 in the domain of ``n``."""
    d = domain_for(n, domain=domain)
    return d.sign(d.coerce(n))


def abs_value(n: Integer, domain: Optional[Any] = None) -> Integer:
    d = domain_for(n, domain=domain)
    with d.guard():
        return d.abs(d.coerce(n))


def _scan(values: Iterable[Any], keep, what: str):
    it = iter(values)
    try:
        best = next(it)
    except StopIteration:
        raise InvalidArgument(f"{what} of an empty sequence is undefined") from None
    for v in it:
        if keep(v, best):
            best = v
    return best


def minimum(values: Iterable[Any]):
    """Smallest element, scanning left to right; the first wins on ties."""
    return _scan(values, lambda v, best: v < best, "minimum")


def maximum(values: Iterable[Any]):
    """Largest element, scanning left to right; the first wins on ties."""
    return _scan(values, lambda v, best: v > best, "maximum")
