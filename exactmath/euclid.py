"""
Euclidean-recurrence algorithms: extended GCD and bounded continued-fraction
convergents.

Both run the same recurrence over three pairs

    r = (r0, r1)   remainders, starting at (|a|, |b|)
    s = (s0, s1)   coefficients of a, starting at (1, 0)
    t = (t0, t1)   coefficients of b, starting at (0, 1)

with the invariant s_i*|a| + t_i*|b| == r_i.  One step takes the truncated
quotient q = r0 / r1 and maps every pair (x0, x1) to (x1, x0 - q*x1).
The signs of a and b are taken once up front and applied to the result.

The recurrence is a plain loop, so stack depth does not grow with the
O(log min(|a|, |b|)) step count.
"""

import fractions
from typing import Any, List, Optional, Tuple

from .domains import Integer, IntegerDomain, domain_for
from .errors import InvalidArgument
from .rational import Fraction


def _step(q, pair):
    x0, x1 = pair
    return x1, x0 - q * x1


def _bezout(d: IntegerDomain, a, b):
    """(g, u, v) for coerced a, b with g == u*a + v*b == gcd(a, b).

    g is r0 of the recurrence, not u*a + v*b recomputed, so no product
    wider than the inputs is formed.
    """
    sign_a, sign_b = d.sign(a), d.sign(b)
    with d.guard():
        r = (d.abs(a), d.abs(b))
        s = (d.one, d.zero)
        t = (d.zero, d.one)
        while r[1] != 0:
            q = d.quot(r[0], r[1])
            r, s, t = _step(q, r), _step(q, s), _step(q, t)
        return r[0], s[0] * sign_a, t[0] * sign_b


def extgcd(a: Integer, b: Integer,
           domain: Optional[Any] = None) -> Tuple[Integer, Integer]:
    """Bezout coefficients (u, v) with u*a + v*b == gcd(a, b) >= 0.

    Args:
        a, b: Integers of any sign.
        domain: Integer domain or its name; inferred from the inputs if None.

    Returns:
        Tuple (u, v) in the selected domain.  extgcd(0, 0) == (0, 0).

    Example:
        >>> extgcd(240, 46)
        (-9, 47)
    """
    d = domain_for(a, b, domain=domain)
    _, u, v = _bezout(d, d.coerce(a), d.coerce(b))
    return u, v


def gcd(a: Integer, b: Integer, domain: Optional[Any] = None) -> Integer:
    """Greatest common divisor, always >= 0; gcd(0, 0) == 0."""
    d = domain_for(a, b, domain=domain)
    g, _, _ = _bezout(d, d.coerce(a), d.coerce(b))
    return g


def is_coprime(a: Integer, b: Integer, domain: Optional[Any] = None) -> bool:
    return bool(gcd(a, b, domain=domain) == 1)


def _fraction_parts(fraction: Any) -> Tuple[Any, Any]:
    if isinstance(fraction, fractions.Fraction):
        return fraction.numerator, fraction.denominator
    try:
        numerator, denominator = fraction
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Expected a (numerator, denominator) pair, got {fraction!r}"
        ) from None
    return numerator, denominator


def convergent(fraction: Any, denominator_bound: Integer,
               domain: Optional[Any] = None) -> Fraction:
    """Continued-fraction convergent of ``fraction`` with |denominator| <= bound.

    Returns the exact value (in lowest terms) when its denominator already
    satisfies the bound, otherwise the last convergent produced before the
    denominator would exceed it.  A denominator equal to the bound counts as
    satisfying it.  The result is normalised to a positive denominator.

    Args:
        fraction: A Fraction, a fractions.Fraction, or any
                  (numerator, denominator) pair.  Need not be reduced.
        denominator_bound: Positive integer.
        domain: Integer domain or its name; inferred from the inputs if None.

    Raises:
        InvalidArgument if the bound is not positive or the denominator is 0.

    Example:
        >>> convergent(Fraction(355, 113), 10)
        Fraction(numerator=22, denominator=7)
    """
    numerator, denominator = _fraction_parts(fraction)
    d = domain_for(numerator, denominator, denominator_bound, domain=domain)
    a, b = d.coerce(numerator), d.coerce(denominator)
    bound = d.coerce(denominator_bound)

    if bound <= 0:
        raise InvalidArgument(
            f"denominator_bound must be positive, got {denominator_bound}"
        )
    if b == 0:
        raise InvalidArgument(f"Fraction {numerator}/{denominator} has a zero denominator")
    if a == 0:
        return Fraction(d.zero, d.one)

    sign_a, sign_b = d.sign(a), d.sign(b)
    with d.guard():
        r = (d.abs(a), d.abs(b))
        s = (d.one, d.zero)
        t = (d.zero, d.one)
        while r[1] != 0 and d.abs(s[1]) <= bound:
            q = d.quot(r[0], r[1])
            r, s, t = _step(q, r), _step(q, s), _step(q, t)

        # s_i*|a| + t_i*|b| == r_i, so |a|/|b| is approximated by -t_i/s_i
        if r[1] == 0 and d.abs(s[1]) <= bound:
            num, den = -t[1], s[1]
        else:
            num, den = -t[0], s[0]
        num, den = num * sign_b, den * sign_a
        if den < 0:
            num, den = -num, -den
    return Fraction(num, den)


def convergents(fraction: Any, domain: Optional[Any] = None) -> List[Fraction]:
    """Every convergent of ``fraction`` in order, ending with its exact value."""
    numerator, denominator = _fraction_parts(fraction)
    d: IntegerDomain = domain_for(numerator, denominator, domain=domain)
    a, b = d.coerce(numerator), d.coerce(denominator)
    if b == 0:
        raise InvalidArgument(f"Fraction {numerator}/{denominator} has a zero denominator")
    if a == 0:
        return [Fraction(d.zero, d.one)]

    out: List[Fraction] = []
    sign = d.sign(a) * d.sign(b)
    with d.guard():
        r = (d.abs(a), d.abs(b))
        s = (d.one, d.zero)
        t = (d.zero, d.one)
        while r[1] != 0:
            q = d.quot(r[0], r[1])
            r, s, t = _step(q, r), _step(q, s), _step(q, t)
            num, den = -t[1], s[1]
            if den < 0:
                num, den = -num, -den
            out.append(Fraction(num * sign, den))
    return out
