# unitsafe/units/systems.py
"""
Named unit systems: one base-unit tag per dimension axis.

The tags are plain strings ("kg", "m", "s") that the conversion table keys on.
Axes follow :data:`unitsafe.core.dimensions.AXES` (mass, length, time).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from unitsafe.core.lists import StaticList


@dataclass(frozen=True, slots=True)
class UnitSystem:
    """An ordered assignment of a base unit to every axis."""

    name: str
    base_units: StaticList

    def __post_init__(self) -> None:
        units = StaticList(self.base_units)
        if not units:
            raise ValueError(f"unit system {self.name!r} needs at least one base unit")
        if not all(isinstance(tag, str) and tag for tag in units):
            raise TypeError("base units must be non-empty strings")
        object.__setattr__(self, "base_units", units)

    def __len__(self) -> int:
        return len(self.base_units)

    def __getitem__(self, axis: int) -> str:
        return self.base_units[axis]

    def __iter__(self) -> Iterator[str]:
        return iter(self.base_units)

    def __str__(self) -> str:
        return self.name


SI = UnitSystem("SI", ("kg", "m", "s"))
CGS = UnitSystem("CGS", ("g", "cm", "s"))
IMPERIAL = UnitSystem("Imperial", ("lb", "ft", "s"))


__all__ = ["UnitSystem", "SI", "CGS", "IMPERIAL"]
