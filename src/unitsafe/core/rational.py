# unitsafe.core.rational
"""
Exact fractions used as dimension exponents.

Arithmetic returns *unsimplified* results computed by cross multiplication;
call :func:`simplify` (or :meth:`Rational.simplify`) to reduce to lowest terms.
Equality is structural, so ``Rational(1, 2) != Rational(2, 4)``; use
:func:`equivalent` to compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from unitsafe.core.errors import UndefinedGCDError
from unitsafe.core.utils import rationalize

RationalLike = Union["Rational", int, Fraction, float]


@dataclass(frozen=True, slots=True, repr=False)
class Rational:
    """Immutable fraction ``numerator/denominator`` with a non-zero denominator."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        for term in (self.numerator, self.denominator):
            if isinstance(term, bool) or not isinstance(term, int):
                raise TypeError(f"Rational terms must be int, got {type(term).__name__}")
        if self.denominator == 0:
            raise ZeroDivisionError("Rational denominator must be non-zero")

    @classmethod
    def from_value(cls, value: RationalLike) -> Rational:
        """Build a Rational from an int, Fraction, Rational or a float close to a small fraction."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, bool):
            raise TypeError("bool is not a valid Rational value")
        if isinstance(value, int):
            return cls(value, 1)
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator)
        if isinstance(value, float):
            frac = rationalize(value)
            return cls(frac.numerator, frac.denominator)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    # --- Helpers ---
    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    def simplify(self) -> Rational:
        return simplify(self)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    # --- Arithmetic (operator overloads) ---
    def __add__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return add(self, o)

    def __radd__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return add(o, self)

    def __sub__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return sub(self, o)

    def __rsub__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return sub(o, self)

    def __mul__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return mul(self, o)

    def __rmul__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return mul(o, self)

    def __truediv__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return div(self, o)

    def __rtruediv__(self, other: object) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return div(o, self)

    def __neg__(self) -> Rational:
        return negate(self)

    def __pos__(self) -> Rational:
        return self

    # --- Ordering by value ---
    def __lt__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return simplify(sub(self, o)).numerator < 0

    def __le__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return simplify(sub(self, o)).numerator <= 0

    def __gt__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return simplify(sub(self, o)).numerator > 0

    def __ge__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return simplify(sub(self, o)).numerator >= 0

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    return None


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of ``|a|`` and ``|b|`` (Euclid).

    ``gcd(0, b) == |b|`` so that ``0/b`` simplifies to ``0/1``.
    ``gcd(0, 0)`` raises UndefinedGCDError.
    """
    a, b = abs(a), abs(b)
    if a == 0 and b == 0:
        raise UndefinedGCDError("gcd(0, 0) is undefined")
    while a:
        a, b = b % a, a
    return b


def simplify(r: Rational) -> Rational:
    """Reduce ``r`` to lowest terms with a positive denominator."""
    g = gcd(r.numerator, r.denominator)
    num, den = r.numerator // g, r.denominator // g
    if den < 0:
        num, den = -num, -den
    return Rational(num, den)


def add(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.denominator + b.numerator * a.denominator, a.denominator * b.denominator)


def sub(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.denominator - b.numerator * a.denominator, a.denominator * b.denominator)


def mul(a: Rational, b: Rational) -> Rational:
    return Rational(a.numerator * b.numerator, a.denominator * b.denominator)


def div(a: Rational, b: Rational) -> Rational:
    if b.is_zero:
        raise ZeroDivisionError(f"division of {a} by zero Rational {b}")
    return Rational(a.numerator * b.denominator, a.denominator * b.numerator)


def negate(a: Rational) -> Rational:
    return Rational(-a.numerator, a.denominator)


def equivalent(a: Rational, b: Rational) -> bool:
    """Equality of simplified forms: ``equivalent(Rational(1, 2), Rational(2, 4))`` is True."""
    return simplify(a) == simplify(b)


ZERO = Rational(0, 1)
HALF = Rational(1, 2)


__all__ = [
    "Rational",
    "RationalLike",
    "gcd",
    "simplify",
    "add",
    "sub",
    "mul",
    "div",
    "negate",
    "equivalent",
    "ZERO",
    "HALF",
]
