"""
unitsafe.units.unit
===================

Defines the `Unit` class: a value tagged with both a `Dimension` and the
`UnitSystem` it is expressed in.

Arithmetic follows the same dimension rules as `Quantity`. When the two
operands live in different systems the right-hand operand is converted into
the left-hand operand's system first, and the result is expressed in the
left operand's system:

>>> area = (4.0 * METER) * (1.0 * CENTIMETER)
>>> area.system is SI, area.value
(True, 0.04)
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from unitsafe.core import dimensions as dims
from unitsafe.core.dimensions import LENGTH, MASS, NUMBER, TIME, Dimension, DimLike
from unitsafe.core.errors import DimensionMismatchError, LengthMismatchError, NotDimensionlessError
from unitsafe.core.quantity import Dimensioned, Quantity
from unitsafe.core.rational import Rational, RationalLike, simplify
from unitsafe.units.conversion import ConversionTable, composed_factor
from unitsafe.units.systems import CGS, IMPERIAL, SI, UnitSystem


class Unit:
    """
    A value with a dimension, expressed in a unit system.

    Attributes
    ----------
    value : Any
        Raw payload in the base units of ``system``.
    dim : Dimension
        Rational exponents per base axis.
    system : UnitSystem
        Base unit for every axis (e.g. SI = kg, m, s).

    Constructing from another `Unit` converts its value into ``system``
    (a plain copy when the systems are the same); a requested ``dim`` must
    match the source dimension. A `Quantity` source is checked the same way and
    its raw value is read as expressed in ``system``.
    """
    __slots__ = ("_value", "_dim", "_system")

    def __init__(
        self,
        value: Any,
        dim: DimLike | None = None,
        system: UnitSystem | None = None,
        *,
        table: ConversionTable | None = None,
    ) -> None:
        if isinstance(value, Unit):
            target_dim = value.dim if dim is None else dims.as_dimension(dim)
            if target_dim != value.dim:
                raise DimensionMismatchError("construct a unit of", target_dim, value.dim)
            target_system = value.system if system is None else system
            raw = value._value_in(target_system, table)
        elif isinstance(value, Dimensioned):
            # a Quantity carries no system: its raw value is taken as expressed in ``system``
            target_dim = value.dim if dim is None else dims.as_dimension(dim)
            if target_dim != value.dim:
                raise DimensionMismatchError("construct a unit of", target_dim, value.dim)
            target_system = SI if system is None else system
            raw = value.value
        else:
            target_dim = NUMBER if dim is None else dims.as_dimension(dim)
            target_system = SI if system is None else system
            raw = value

        if len(target_dim) != len(target_system):
            raise LengthMismatchError((len(target_dim), len(target_system)))

        object.__setattr__(self, "_value", raw)
        object.__setattr__(self, "_dim", target_dim)
        object.__setattr__(self, "_system", target_system)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Unit is immutable; cannot set {name!r}")

    @classmethod
    def from_unit(
        cls,
        other: Unit,
        system: UnitSystem,
        dim: DimLike | None = None,
        table: ConversionTable | None = None,
    ) -> Unit:
        """Re-express ``other`` in ``system``; ``dim``, when given, must equal ``other.dim``."""
        return cls(other, dim, system, table=table)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def dim(self) -> Dimension:
        return self._dim

    @property
    def system(self) -> UnitSystem:
        return self._system

    def to(self, system: UnitSystem, table: ConversionTable | None = None) -> Unit:
        if system == self.system:
            return self
        return Unit(self, system=system, table=table)

    def as_quantity(self) -> Quantity:
        """The raw value and dimension, without the system tag."""
        return Quantity(self.value, self.dim)

    def _value_in(self, system: UnitSystem, table: ConversionTable | None = None) -> Any:
        if system == self.system:
            # same system: plain copy, no factor applied
            return self.value
        return self.value * composed_factor(self.dim, self.system, system, table)

    # --- operand handling ---
    def _operand(self, other: object) -> tuple[Any, Dimension] | None:
        """Split ``other`` into (raw in our system, dim); plain numbers are dimensionless."""
        if isinstance(other, Unit):
            return other._value_in(self.system), other.dim
        if isinstance(other, numbers.Number):
            return other, dims.dimensionless(len(self.dim))
        return None

    def _scalar(self, other: object) -> tuple[Any, Dimension] | None:
        if isinstance(other, numbers.Number):
            return other, dims.dimensionless(len(self.dim))
        return None

    def _require_same_dim(self, operation: str, other_dim: Dimension) -> None:
        if self.dim != other_dim:
            raise DimensionMismatchError(operation, self.dim, other_dim)

    def _require_dimensionless(self, operation: str, other_dim: Dimension) -> None:
        if other_dim != dims.dimensionless(len(self.dim)):
            raise NotDimensionlessError(operation, other_dim)

    def _new(self, value: Any, dim: Dimension) -> Unit:
        return Unit(value, dim, self.system)

    # --- addition / subtraction ---
    def __add__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add", dim)
        return self._new(self.value + raw, self.dim)

    def __radd__(self, other: object) -> Unit:
        o = self._scalar(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add", dim)
        return self._new(raw + self.value, self.dim)

    def __sub__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract", dim)
        return self._new(self.value - raw, self.dim)

    def __rsub__(self, other: object) -> Unit:
        o = self._scalar(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract", dim)
        return self._new(raw - self.value, self.dim)

    def __iadd__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("add-assign", dim)
        return self._new(self.value + raw, self.dim)

    def __isub__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_same_dim("subtract-assign", dim)
        return self._new(self.value - raw, self.dim)

    # --- multiplication / division: result in the left operand's system ---
    def __mul__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return self._new(self.value * raw, dims.multiply(self.dim, dim))

    def __rmul__(self, other: object) -> Unit:
        # 4.0 * METER -> 4 m
        o = self._scalar(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return self._new(raw * self.value, dims.multiply(dim, self.dim))

    def __truediv__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return self._new(self.value / raw, dims.multiply(self.dim, dims.invert(dim)))

    def __rtruediv__(self, other: object) -> Unit:
        o = self._scalar(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        return self._new(raw / self.value, dims.multiply(dim, dims.invert(self.dim)))

    def __imul__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_dimensionless("multiply-assign", dim)
        return self._new(self.value * raw, self.dim)

    def __itruediv__(self, other: object) -> Unit:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
        self._require_dimensionless("divide-assign", dim)
        return self._new(self.value / raw, self.dim)

    def __pow__(self, r: RationalLike, modulo: Any | None = None) -> Unit:
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Unit.")
        exp = simplify(Rational.from_value(r))
        return self._new(self.value ** (exp.numerator / exp.denominator), dims.power(self.dim, exp))

    def __neg__(self) -> Unit:
        return self._new(-self.value, self.dim)

    def __pos__(self) -> Unit:
        return self

    def __abs__(self) -> Unit:
        return self._new(abs(self.value), self.dim)

    # --- comparisons (right operand converted into our system) ---
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Unit) and other.dim != self.dim:
            # unequal before any conversion lookup
            return False
        o = self._operand(other)
        if o is None:
            return NotImplemented
        raw, dim = o
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
    def __getitem__(self, index: Any) -> Unit:
        return self._new(self.value[index], self.dim)

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
        return f"Unit({self.value!r}, {self.dim!r}, {self.system.name})"


def sqrt(u: Unit) -> Unit:
    """Square root of the value, dimension exponents halved, system unchanged."""
    value = math.sqrt(u.value) if isinstance(u.value, numbers.Real) else u.value ** 0.5
    return Unit(value, dims.sqrt(u.dim), u.system)


# ---------------------------------------------------------------------------
# Named units (immutable; value 1 in their own system)
# ---------------------------------------------------------------------------
METER = Unit(1.0, LENGTH, SI)
KILOGRAM = Unit(1.0, MASS, SI)
SECOND = Unit(1.0, TIME, SI)
CENTIMETER = Unit(1.0, LENGTH, CGS)
GRAM = Unit(1.0, MASS, CGS)
FOOT = Unit(1.0, LENGTH, IMPERIAL)
POUND = Unit(1.0, MASS, IMPERIAL)


__all__ = [
    "Unit",
    "sqrt",
    "METER",
    "KILOGRAM",
    "SECOND",
    "CENTIMETER",
    "GRAM",
    "FOOT",
    "POUND",
]
