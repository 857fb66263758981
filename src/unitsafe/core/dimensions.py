# unitsafe.core.dimensions

from __future__ import annotations

from fractions import Fraction
from typing import Any, Iterable, TypeAlias, Union

from unitsafe.core.lists import StaticList, elementwise
from unitsafe.core.rational import HALF, ZERO, Rational, RationalLike, add, mul, negate, simplify
from unitsafe.core.utils import format_exponent

# Default base axes, in storage order.
AXES = ("mass", "length", "time")
AXIS_SYMBOLS = ("M", "L", "T")

DimLike: TypeAlias = Union["Dimension", Iterable[Union[int, Fraction, Rational, float]]]

# --- Core object -------------------------------------------------------------

class Dimension(StaticList):
    """
    Immutable vector of rational exponents, one per base axis.

    Every exponent is stored simplified, so two dimensions are equal exactly
    when they have the same length and the same exponents.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0)) -> "Dimension":
        if isinstance(data, Dimension):
            return tuple.__new__(cls, data)

        t = tuple(simplify(Rational.from_value(x)) for x in data)
        if not t:
            raise ValueError("Dimension needs at least one axis.")
        return tuple.__new__(cls, t)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: Any) -> "Dimension": # type: ignore[override]
        if not isinstance(other, (Dimension, tuple, list)):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other: Any) -> "Dimension":
        if not isinstance(other, (Dimension, tuple, list)):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other: Any) -> "Dimension":
        """Handles (tuple / Dimension) by calculating (other / self)."""
        if not isinstance(other, (tuple, list)):
            return NotImplemented
        return divide(other, self)

    def __pow__(self, n: RationalLike, modulo: Any | None = None) -> "Dimension":
        # Python may call __pow__ with a third arg (modulo); reject it explicitly
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        return power(self, n)

    def __invert__(self) -> "Dimension":
        return invert(self)

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x.is_zero for x in self)

    def __repr__(self) -> str:
        symbols = AXIS_SYMBOLS if len(self) == len(AXIS_SYMBOLS) else tuple(f"a{i}" for i in range(len(self)))

        parts = ""
        for sym, exp in zip(symbols, self, strict=True):
            if not exp.is_zero:
                parts += f"[{sym}^{format_exponent(exp.numerator, exp.denominator)}]"

        return parts or "[1]"


Dim: TypeAlias = Dimension


def as_dimension(d: DimLike) -> Dimension:
    return d if isinstance(d, Dimension) else Dimension(d)


def int_dim(*exponents: int) -> Dimension:
    """Build a dimension from integer exponents, e.g. ``int_dim(1, 1, -2)`` for force."""
    return Dimension(exponents)


def dimensionless(n: int = len(AXES)) -> Dimension:
    """The all-zero dimension with ``n`` axes."""
    return Dimension.repeat(n, ZERO)


# --- Algebra -----------------------------------------------------------------

def multiply(d1: DimLike, d2: DimLike) -> Dimension:
    """Add exponents axis by axis."""
    return Dimension(elementwise(lambda a, b: simplify(add(a, b)), as_dimension(d1), as_dimension(d2)))


def invert(d: DimLike) -> Dimension:
    """Negate every exponent."""
    return Dimension(elementwise(lambda a: simplify(negate(a)), as_dimension(d)))


def power(d: DimLike, r: RationalLike) -> Dimension:
    """Scale every exponent by the rational power ``r``."""
    exp = simplify(Rational.from_value(r))
    return Dimension(elementwise(lambda a: simplify(mul(a, exp)), as_dimension(d)))


def sqrt(d: DimLike) -> Dimension:
    return power(d, HALF)


def divide(d1: DimLike, d2: DimLike) -> Dimension:
    return multiply(d1, invert(d2))


# --- Public constants --------------------------------------------------------
#                         M   L   T
NUMBER: Dim       = int_dim(0,  0,  0)
MASS: Dim         = int_dim(1,  0,  0)
LENGTH: Dim       = int_dim(0,  1,  0)
TIME: Dim         = int_dim(0,  0,  1)
VELOCITY: Dim     = int_dim(0,  1, -1)
ACCELERATION: Dim = int_dim(0,  1, -2)
FORCE: Dim        = int_dim(1,  1, -2)
WORK: Dim         = int_dim(1,  2, -2)
AREA: Dim         = int_dim(0,  2,  0)
VOLUME: Dim       = int_dim(0,  3,  0)
FREQUENCY: Dim    = int_dim(0,  0, -1)
MOMENTUM: Dim     = int_dim(1,  1, -1)
POWER: Dim        = int_dim(1,  2, -3)
PRESSURE: Dim     = int_dim(1, -1, -2)
DENSITY: Dim      = int_dim(1, -3,  0)


__all__ = [
    "AXES",
    "Dim",
    "DimLike",
    "Dimension",
    "as_dimension",
    "int_dim",
    "dimensionless",
    "multiply",
    "invert",
    "power",
    "sqrt",
    "divide",
    "NUMBER",
    "MASS",
    "LENGTH",
    "TIME",
    "VELOCITY",
    "ACCELERATION",
    "FORCE",
    "WORK",
    "AREA",
    "VOLUME",
    "FREQUENCY",
    "MOMENTUM",
    "POWER",
    "PRESSURE",
    "DENSITY",
]
