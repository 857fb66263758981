"""
unitsafe.units.registry
=======================

An explicit, thread-safe registry of named units and unit systems.

Named units are immutable `Unit` constants; the registry only maps symbols
(and aliases) to them, so looking a unit up never hands out shared mutable
state. Systems are registered by name so user-defined systems can be found
the same way as SI, CGS and Imperial.

- `register`, `register_alias`, `register_system` to extend it.
- `get`, `has`, `system`, `all`, `systems` to query it.
- `as_namespace()` for attribute-style access (``u.m``, ``u("cm")``).
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import ClassVar, Dict, Mapping

from unitsafe.units.systems import CGS, IMPERIAL, SI, UnitSystem
from unitsafe.units.unit import CENTIMETER, FOOT, GRAM, KILOGRAM, METER, POUND, SECOND, Unit

logger = logging.getLogger(__name__)


def normalize_symbol(s: str) -> str:
    """Strip surrounding whitespace and Unicode-normalize to NFC."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry of `Unit` constants and `UnitSystem`s."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}
        self._systems: Dict[str, UnitSystem] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    # -------------------------- public API ---------------------------------
    def register(self, symbol: str, unit: Unit, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) ``unit`` under ``symbol``."""
        if not isinstance(unit, Unit):
            raise TypeError(f"Can only register Unit objects, got {type(unit).__name__}")
        sym = normalize_symbol(symbol)
        if not sym:
            raise ValueError("Unit symbol must be a non-empty string.")

        # The lock wraps the entire check-and-set operation.
        with self._lock:
            if sym in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register unit '{sym}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if not replace:
                if sym in self._units:
                    raise ValueError(
                        f"Cannot register unit '{sym}': "
                        "a unit with this name already exists."
                    )
                if sym in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{sym}': "
                        "an alias with this name already exists."
                    )
            self._units[sym] = unit
        logger.debug("Registered unit %r in system %s", sym, unit.system.name)

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        key = normalize_symbol(alias)
        with self._lock:
            if key in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if canonical not in self._units:
                raise ValueError(f"Cannot alias '{alias}' to unknown unit '{canonical}'.")
            if not replace and key in self._units and key != canonical:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    f"a unit with the name '{key}' already exists."
                )
            self._aliases[key] = canonical

    def register_system(self, system: UnitSystem, replace: bool = False) -> None:
        with self._lock:
            if not replace and system.name in self._systems:
                raise ValueError(f"Unit system '{system.name}' is already registered.")
            self._systems[system.name] = system
        logger.debug("Registered unit system %s %s", system.name, tuple(system.base_units))

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except ValueError:
            return False

    def get(self, symbol: str) -> Unit:
        """Lookup a unit by symbol or alias. Raises `ValueError` if unknown."""
        sym = normalize_symbol(symbol)
        with self._lock:
            sym = self._aliases.get(sym, sym)
            u = self._units.get(sym)
        if u is None:
            raise ValueError(f"Unknown unit symbol: {symbol}")
        return u

    def system(self, name: str) -> UnitSystem:
        with self._lock:
            s = self._systems.get(name)
        if s is None:
            raise ValueError(f"Unknown unit system: {name}")
        return s

    def all(self) -> Mapping[str, Unit]:
        with self._lock:
            return dict(self._units)

    def systems(self) -> Mapping[str, UnitSystem]:
        with self._lock:
            return dict(self._systems)

    def as_namespace(self) -> UnitNamespace:
        return UnitNamespace(self)


class UnitNamespace:
    """Attribute-style view of a registry: ``u.m``, ``u("cm")``."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "UnitsRegistry") -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def __call__(self, spec: str) -> Unit:
        return self._reg.get(spec)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.get(name)
        except ValueError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        base_dir = set(super().__dir__())
        units = set(self._reg.all().keys())
        aliases = set(self._reg._aliases.keys())
        return sorted(base_dir | units | aliases)

UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap a default registry
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()

    for system in (SI, CGS, IMPERIAL):
        reg.register_system(system)

    named_units = (
        ("m",  METER),
        ("kg", KILOGRAM),
        ("s",  SECOND),
        ("cm", CENTIMETER),
        ("g",  GRAM),
        ("ft", FOOT),
        ("lb", POUND),
    )
    for sym, unit in named_units:
        reg.register(sym, unit)

    reg.register_alias("meter", "m")
    reg.register_alias("metre", "m")
    reg.register_alias("kilogram", "kg")
    reg.register_alias("second", "s")
    reg.register_alias("centimeter", "cm")
    reg.register_alias("centimetre", "cm")
    reg.register_alias("gram", "g")
    reg.register_alias("foot", "ft")
    reg.register_alias("pound", "lb")

    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
]
