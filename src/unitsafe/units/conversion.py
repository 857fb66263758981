"""
unitsafe.units.conversion
=========================

Conversion factors between base units and their composition across axes.

A `ConversionTable` stores ``(unit_a, unit_b) -> factor`` meaning
"one ``unit_b`` equals ``factor`` ``unit_a``". Only one direction of each pair
needs an entry; the reverse is the reciprocal and a unit converts to itself
with factor 1.

`composed_factor` raises each per-axis factor to that axis's rational
exponent and multiplies the results, giving the factor that re-expresses a
value of a given dimension from one unit system in another.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from unitsafe.core.dimensions import DimLike, as_dimension
from unitsafe.core.errors import LengthMismatchError, UnknownConversionError
from unitsafe.core.lists import elementwise
from unitsafe.core.rational import Rational
from unitsafe.units.systems import UnitSystem

logger = logging.getLogger(__name__)

UnitPair = Tuple[str, str]


class ConversionTable(Mapping[UnitPair, float]):
    """Read-only table of base-unit conversion factors."""

    __slots__ = ("_factors",)

    def __init__(self, entries: Mapping[UnitPair, float] | Iterable[tuple[UnitPair, float]] = ()) -> None:
        items = entries.items() if isinstance(entries, Mapping) else entries
        factors: dict[UnitPair, float] = {}
        for (unit_a, unit_b), factor in items:
            factor = float(factor)
            if not (factor > 0 and math.isfinite(factor)):
                raise ValueError(
                    f"conversion factor for ({unit_a!r}, {unit_b!r}) must be positive and finite, got {factor!r}"
                )
            factors[(unit_a, unit_b)] = factor

        self._factors = MappingProxyType(factors)
        logger.debug("Conversion table built with %d entries", len(factors))

    # Mapping protocol
    def __getitem__(self, key: UnitPair) -> float:
        return self._factors[key]

    def __iter__(self):
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __repr__(self) -> str:
        return f"ConversionTable({dict(self._factors)!r})"

    def extended(self, entries: Mapping[UnitPair, float]) -> ConversionTable:
        """Return a new table with ``entries`` added (overriding existing pairs)."""
        merged = dict(self._factors)
        merged.update(entries)
        return ConversionTable(merged)

    def base_factor(self, unit_a: str, unit_b: str) -> float:
        """
        Value of one ``unit_b`` expressed in ``unit_a``.

        Same-unit lookups give exactly 1.0; a missing pair falls back to the
        reciprocal of the reverse entry. Raises UnknownConversionError when
        neither direction is stored.
        """
        if unit_a == unit_b:
            return 1.0

        factor = self._factors.get((unit_a, unit_b))
        if factor is not None:
            return factor

        reverse = self._factors.get((unit_b, unit_a))
        if reverse is not None:
            return 1.0 / reverse

        logger.debug("No conversion between %r and %r", unit_a, unit_b)
        raise UnknownConversionError(unit_a, unit_b)


def _axis_factor(table: ConversionTable, exp: Rational, unit_to: str, unit_from: str) -> float:
    # axes the dimension does not use need no table entry
    if exp.is_zero:
        return 1.0
    return table.base_factor(unit_to, unit_from) ** (exp.numerator / exp.denominator)


def composed_factor(
    dim: DimLike,
    system_from: UnitSystem,
    system_to: UnitSystem,
    table: ConversionTable | None = None,
) -> float:
    """
    Factor converting a value of dimension ``dim`` from ``system_from`` to ``system_to``.

    For every axis ``i`` the base factor ``system_to[i] <- system_from[i]`` is
    raised to ``dim[i]`` (floating exponent, so fractional exponents work) and
    the per-axis results are multiplied together.

    Examples
    --------
    >>> round(composed_factor(AREA, SI, IMPERIAL), 4)  # m² -> ft²
    10.7639
    """
    if table is None:
        table = DEFAULT_CONVERSIONS
    dim = as_dimension(dim)
    lengths = (len(dim), len(system_to), len(system_from))
    if len(set(lengths)) != 1:
        raise LengthMismatchError(lengths)
    if system_from == system_to:
        return 1.0

    per_axis = elementwise(
        lambda exp, unit_to, unit_from: _axis_factor(table, exp, unit_to, unit_from),
        dim,
        system_to.base_units,
        system_from.base_units,
    )
    return math.prod(per_axis, start=1.0)


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------

_KG_PER_G = 0.001
_KG_PER_LB = 0.453592

DEFAULT_CONVERSIONS: ConversionTable = ConversionTable({
    ("kg", "g"):  _KG_PER_G,               # gram
    ("m",  "cm"): 0.01,                    # centimetre
    ("kg", "lb"): _KG_PER_LB,              # pound
    ("m",  "ft"): 0.3048,                  # foot
    ("g",  "lb"): _KG_PER_LB / _KG_PER_G,  # pound in grams
    ("m",  "in"): 0.0254,                  # inch
    ("cm", "ft"): 30.48,
    ("cm", "in"): 2.54,
    ("ft", "in"): 1.0 / 12.0,
})


__all__ = ["ConversionTable", "composed_factor", "DEFAULT_CONVERSIONS", "UnitPair"]
