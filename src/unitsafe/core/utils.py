"""
unitsafe.core.utils
===================

Small helpers shared by the core modules: turning floats into exact
fractions and formatting exponents for diagnostics.
"""

from __future__ import annotations

from fractions import Fraction
from math import isclose, isfinite

from unitsafe.core.errors import IrrationalExponentError

# Largest denominator accepted when a float exponent is turned into a fraction.
MAX_DENOMINATOR = 1000


def rationalize(x: float, max_denominator: int = MAX_DENOMINATOR) -> Fraction:
    """
    Return the exact fraction closest to ``x`` with a bounded denominator.

    ``0.5`` becomes ``1/2`` and ``0.3333333333333333`` becomes ``1/3``.
    Raises IrrationalExponentError when ``x`` is not finite or no fraction with
    a denominator up to ``max_denominator`` matches it to float precision.
    """
    if not isfinite(x):
        raise IrrationalExponentError(f"cannot rationalize non-finite value {x!r}")

    frac = Fraction(x).limit_denominator(max_denominator)
    if not isclose(float(frac), x, rel_tol=1e-12, abs_tol=1e-15):
        raise IrrationalExponentError(
            f"{x!r} is not close to a fraction with denominator <= {max_denominator}"
        )
    return frac


def format_exponent(numerator: int, denominator: int) -> str:
    """Render an exponent as ``2`` or ``(1/2)``."""
    if denominator == 1:
        return str(numerator)
    return f"({numerator}/{denominator})"
