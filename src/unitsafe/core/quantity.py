"""
unitsafe.core.quantity
======================

Defines the `Quantity` class: a raw value paired with a `Dimension`.

Every operator first computes the dimension of the result with the dimension
algebra and only then performs the matching arithmetic on the raw values, so
an invalid combination (adding a length to a mass) raises before any number
is produced.

The raw value may be an int, a float, or any aggregate type (a small vector,
an array) that supports the operators the caller uses. Plain numbers mixed
into an expression behave as dimensionless quantities.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Protocol, runtime_checkable

from unitsafe.core import dimensions as dims
from unitsafe.core.dimensions import NUMBER, Dimension, DimLike
from unitsafe.core.errors import DimensionMismatchError, NotDimensionlessError
from unitsafe.core.rational import Rational, RationalLike, simplify


@runtime_checkable
class Dimensioned(Protocol):
    """Anything carrying a raw value together with a dimension."""

    @property
    def value(self) -> Any: ...

    @property
    def dim(self) -> Dimension: ...


def _raw_pow(value: Any, exp: Rational) -> Any:
    # floating exponent, as for a plain ``x ** 0.5``
    return value ** (exp.numerator / exp.denominator)


def _raw_sqrt(value: Any) -> Any:
    if isinstance(value, numbers.Real):
        return math.sqrt(value)
    return value ** 0.5


class Quantity:
    """
    A physical quantity: a raw value and its dimension.

    Attributes
    ----------
    value : Any
        The raw payload (number or aggregate).
    dim : Dimension
        Rational exponents per base axis. Defaults to dimensionless.

    Quantities are immutable; ``q += other`` rebinds ``q`` to a new object.
    """
    __slots__ = ("_value", "_dim")

    def __init__(self, value: Any, dim: DimLike | None = None) -> None:
        if isinstance(value, Dimensioned):
            # copy construction (a Quantity or a Unit): the dimension must match when one is requested
            target = value.dim if dim is None else dims.as_dimension(dim)
            if target != value.dim:
                raise DimensionMismatchError("construct a quantity of", target, value.dim)
            raw = value.value
        else:
            target = NUMBER if dim is None else dims.as_dimension(dim)
            raw = value

        object.__setattr__(self, "_value", raw)
        object.__setattr__(self, "_dim", target)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Quantity is immutable; cannot set {name!r}")

    @property
    def value(self) -> Any:
        return self._value

    @property
    def dim(self) -> Dimension:
        return self._dim

    def assign(self, other: Quantity) -> Quantity:
        """Return ``other``'s value in a quantity of this dimension; dimensions must match."""
        if not isinstance(other, Quantity):
            raise TypeError(f"Can only assign a Quantity, got {type(other).__name__}")
        if other.dim != self.dim:
            raise DimensionMismatchError("assign", self.dim, other.dim)
        return Quantity(other.value, self.dim)

    # --- operand handling ---
    def _operand(self, other: object) -> tuple[Any, Dimension] | None:
        """Split ``other`` into (raw, dim); plain numbers are dimensionless."""
        if isinstance(other, Quantity):
            return other.value, other.dim
        if isinstance(other, numbers.Number):
            return other, dims.dimensionless(len(self.dim))
        return None

    def _require_same_dim(self, operation: str, other_dim: Dimension) -> None:
        if self.dim != other_dim:
            raise DimensionMismatchError(operation, self.dim, other_dim)

    def _require_dimensionless(self, operation: str, other_dim: Dimension) -> None:
        if other_dim != dims.dimensionless(len(self.dim)):
            raise NotDimensionlessError(operation, other_dim)

    # --- addition / subtraction: equal dimensions only ---
    def __add__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add", dim)
        return Quantity(self.value + raw, self.dim)

    def __radd__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add", dim)
        return Quantity(raw + self.value, self.dim)

    def __sub__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract", dim)
        return Quantity(self.value - raw, self.dim)

    def __rsub__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract", dim)
        return Quantity(raw - self.value, self.dim)

    def __iadd__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add-assign", dim)
        return Quantity(self.value + raw, self.dim)

    def __isub__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract-assign", dim)
        return Quantity(self.value - raw, self.dim)

    # --- multiplication / division: dimensions combine ---
    def __mul__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return Quantity(self.value * raw, dims.multiply(self.dim, dim))

    def __rmul__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return Quantity(raw * self.value, dims.multiply(dim, self.dim))

    def __truediv__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        new_dim = dims.multiply(self.dim, dims.invert(dim))
        return Quantity(self.value / raw, new_dim)

    def __rtruediv__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        new_dim = dims.multiply(dim, dims.invert(self.dim))
        return Quantity(raw / self.value, new_dim)

    # We can only multiply-assign and divide-assign by dimensionless values.
    def __imul__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_dimensionless("multiply-assign", dim)
        return Quantity(self.value * raw, self.dim)

    def __itruediv__(self, other: object) -> Quantity:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_dimensionless("divide-assign", dim)
        return Quantity(self.value / raw, self.dim)

    def __pow__(self, r: RationalLike, modulo: Any | None = None) -> Quantity:
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Quantity.")
        exp = simplify(Rational.from_value(r))
        return Quantity(_raw_pow(self.value, exp), dims.power(self.dim, exp))

    def __neg__(self) -> Quantity:
        return Quantity(-self.value, self.dim)

    def __pos__(self) -> Quantity:
        return self

    def __abs__(self) -> Quantity:
        return Quantity(abs(self.value), self.dim)

    # --- comparisons ---
    def __eq__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        # Not equal if dims don't match
        return self.dim == dim and bool(self.value == raw)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("compare", dim)
        return self.value < raw

    def __le__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("compare", dim)
        return self.value <= raw

    def __gt__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("compare", dim)
        return self.value > raw

    def __ge__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("compare", dim)
        return self.value >= raw

    # --- aggregate payloads ---
    def __getitem__(self, index: Any) -> Quantity:
        # each component carries the dimension of the whole
        return Quantity(self.value[index], self.dim)

    def __len__(self) -> int:
        return len(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __float__(self) -> float:
        if not self.dim.is_dimensionless:
            raise NotDimensionlessError("convert to float", self.dim)
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Quantity({self.value!r}, {self.dim!r})"


def sqrt(q: Quantity) -> Quantity:
    """Square root of the value; the dimension exponents are halved."""
    return Quantity(_raw_sqrt(q.value), dims.sqrt(q.dim))


def discard_dims(q: Dimensioned) -> Any:
    """
    Return the raw value, dropping the dimension.

    This is the explicit escape hatch for handing values to code that does
    not know about dimensions; nothing is checked after this point.
    """
    if not isinstance(q, Dimensioned):
        raise TypeError(f"discard_dims expects a dimensioned value, got {type(q).__name__}")
    return q.value


# Some useful numbers
EULERS = Quantity(math.e)
PI = Quantity(math.pi)
PHI = Quantity((1 + math.sqrt(5)) / 2)


__all__ = ["Quantity", "Dimensioned", "sqrt", "discard_dims", "EULERS", "PI", "PHI"]
