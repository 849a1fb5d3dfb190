"""
Fraction pair type.

Unlike ``fractions.Fraction`` this keeps exactly the numerator and
denominator it was built with: no reduction, no sign normalisation.  Values
of either integer domain may be stored.
"""

import fractions
from typing import Any, NamedTuple


class Fraction(NamedTuple):
    """An unreduced (numerator, denominator) pair."""
    numerator: Any
    denominator: Any

    def to_fraction(self) -> fractions.Fraction:
        """Exact reduced value.  Raises ZeroDivisionError for a zero denominator."""
        return fractions.Fraction(int(self.numerator), int(self.denominator))

    def __float__(self) -> float:
        return float(self.to_fraction())

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
