"""
unitsafe: dimension-safe physical quantities for Python.

unitsafe tags numeric values with their physical dimension (mass, length,
time and their rational combinations) so that adding a length to a mass is
rejected before it can produce a number, while multiplying a length by a
force yields work automatically. A units layer adds named unit systems
(SI, CGS, Imperial) and conversion between them.

This module exposes a minimal, stable public API. Heavy subsystems (e.g. the
units registry) are imported lazily to avoid import-time side effects.
"""

from importlib import metadata as _metadata


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("unitsafe")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

__all__ = ["__version__", "__author__", "__license__"]
