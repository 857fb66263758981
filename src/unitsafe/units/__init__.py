"""
unitsafe.units
==============

Unit systems, conversion and the named-unit registry.

Names are resolved lazily so that importing ``unitsafe.units`` does not build
the default registry until something asks for it.
"""

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from unitsafe.units.registry import UnitsRegistry

# public name -> defining module
_LAZY_EXPORTS = {
    "Unit": "unitsafe.units.unit",
    "sqrt": "unitsafe.units.unit",
    "UnitSystem": "unitsafe.units.systems",
    "SI": "unitsafe.units.systems",
    "CGS": "unitsafe.units.systems",
    "IMPERIAL": "unitsafe.units.systems",
    "ConversionTable": "unitsafe.units.conversion",
    "composed_factor": "unitsafe.units.conversion",
    "DEFAULT_CONVERSIONS": "unitsafe.units.conversion",
}

# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "UnitsRegistry":
    from unitsafe.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. 'u' is a namespace over the default registry;
    the other public names come from their defining submodules.
    """
    if name == "u":
        return _get_default_registry().as_namespace()
    module = _LAZY_EXPORTS.get(name)
    if module is not None:
        return getattr(import_module(module), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    return sorted(set(globals().keys()) | set(_LAZY_EXPORTS) | {"u"})
