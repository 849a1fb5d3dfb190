"""
Modular arithmetic: canonical reduction, square-and-multiply exponentiation
and modular inverse.

All values are exact.  In a fixed-width domain the caller must keep every
intermediate inside the width; the overflow guard turns a violation into
ArithmeticOverflow instead of a silently wrapped result.
"""

from typing import Any, Optional

from .domains import FixedWidthDomain, Integer, IntegerDomain, domain_for
from .errors import ArithmeticOverflow, InvalidArgument, NotInvertible
from .euclid import _bezout


def _require_positive_modulus(modulus) -> None:
    if modulus <= 0:
        raise InvalidArgument(f"modulus must be positive, got {modulus}")


def mod_floor(value: Integer, modulus: Integer,
              domain: Optional[Any] = None) -> Integer:
    """Representative of ``value`` modulo ``modulus`` in [0, modulus).

    >>> mod_floor(-1, 5)
    4
    """
    d = domain_for(value, modulus, domain=domain)
    value, modulus = d.coerce(value), d.coerce(modulus)
    _require_positive_modulus(modulus)

    with d.guard():
        r = d.rem(value, modulus)
        # truncating remainder lies in (-modulus, modulus)
        return r + modulus if r < 0 else r


def _check_square_fits(d: IntegerDomain, modulus: Integer) -> None:
    """(modulus - 1)**2 must be representable for the reductions to be exact."""
    if not isinstance(d, FixedWidthDomain) or not d.check_overflow:
        return
    largest = (int(modulus) - 1) ** 2
    if not d.fits(largest):
        raise ArithmeticOverflow(
            f"pow_mod needs (modulus - 1)**2 = {largest} to fit in {d.name}; "
            f"use a wider domain or the arbitrary-precision domain"
        )


def pow_mod(base: Integer, exponent: Integer, modulus: Integer,
            domain: Optional[Any] = None) -> Integer:
    """base**exponent mod modulus by square-and-multiply.

    Walks the bits of ``exponent`` from least to most significant, so it
    costs O(log exponent) multiplications of values below modulus**2.

    Args:
        base: Strictly positive integer.
        exponent: Non-negative integer.
        modulus: Strictly positive integer.  In a fixed-width domain,
                 (modulus - 1)**2 must fit the width.
        domain: Integer domain or its name; inferred from the inputs if None.

    Returns:
        Result in [0, modulus).

    Raises:
        InvalidArgument for a non-positive base or modulus or a negative
        exponent.  ArithmeticOverflow if modulus**2 does not fit a
        fixed-width domain.

    Example:
        >>> pow_mod(4, 13, 497)
        445
    """
    d = domain_for(base, exponent, modulus, domain=domain)
    base, exponent, modulus = d.coerce(base), d.coerce(exponent), d.coerce(modulus)

    if exponent < 0:
        raise InvalidArgument(f"exponent must be non-negative, got {exponent}")
    _require_positive_modulus(modulus)
    if base <= 0:
        raise InvalidArgument(f"base must be strictly positive, got {base}")
    _check_square_fits(d, modulus)

    with d.guard():
        result = d.rem(d.one, modulus)
        power = d.rem(base, modulus)
        while exponent > 0:
            if exponent & 1:
                result = d.rem(result * power, modulus)
            power = d.rem(power * power, modulus)
            exponent >>= 1
        return result


def inverse_mod(a: Integer, modulus: Integer,
                domain: Optional[Any] = None) -> Integer:
    """x in [0, modulus) with a*x == 1 (mod modulus).

    ``a`` is reduced into [0, modulus) first, so any ``a`` whose residue
    has an inverse works, however large.

    Raises:
        InvalidArgument if modulus <= 0.
        NotInvertible if a and modulus are not coprime.

    >>> inverse_mod(3, 11)
    4
    """
    d = domain_for(a, modulus, domain=domain)
    a, modulus = d.coerce(a), d.coerce(modulus)
    _require_positive_modulus(modulus)

    residue = mod_floor(a, modulus, domain=d)
    g, u, _ = _bezout(d, residue, modulus)
    if g != 1:
        raise NotInvertible(
            f"{a} has no inverse modulo {modulus} (gcd is {g})"
        )
    return mod_floor(u, modulus, domain=d)
