"""
unitsafe.core.errors
====================

Exception types raised by the dimension algebra and the units layer.

Each error also derives from the builtin exception that plain Python code
would raise for the same situation (``TypeError`` for operand mismatches,
``ValueError`` for bad values, ``KeyError`` for missing table entries), so
existing ``except TypeError`` handlers keep working.
"""

from __future__ import annotations


class UnitsafeError(Exception):
    """Base class for every error raised by unitsafe."""


class DimensionMismatchError(UnitsafeError, TypeError):
    """Operands of an operation that requires equal dimensions differ."""

    def __init__(self, operation: str, left: object, right: object) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(f"cannot {operation} {left!r} and {right!r}: dimensions differ")


class NotDimensionlessError(UnitsafeError, TypeError):
    """Right-hand side of ``*=`` or ``/=`` carries a dimension."""

    def __init__(self, operation: str, dim: object) -> None:
        self.operation = operation
        self.dim = dim
        super().__init__(f"can only {operation} by a dimensionless value, got {dim!r}")


class UndefinedGCDError(UnitsafeError, ValueError):
    """``gcd(0, 0)`` has no value."""


class LengthMismatchError(UnitsafeError, ValueError):
    """Elementwise combination of lists with unequal lengths."""

    def __init__(self, lengths: tuple[int, ...]) -> None:
        self.lengths = lengths
        super().__init__(f"elementwise operands must have equal length, got lengths {lengths}")


class UnknownConversionError(UnitsafeError, KeyError):
    """No conversion factor is known between two base units."""

    def __init__(self, unit_a: str, unit_b: str) -> None:
        self.unit_a = unit_a
        self.unit_b = unit_b
        super().__init__(f"no conversion between {unit_a!r} and {unit_b!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would quote the whole message.
        return str(self.args[0])


class IrrationalExponentError(UnitsafeError, ValueError):
    """A float could not be expressed as a small exact fraction."""


__all__ = [
    "UnitsafeError",
    "DimensionMismatchError",
    "NotDimensionlessError",
    "UndefinedGCDError",
    "LengthMismatchError",
    "UnknownConversionError",
    "IrrationalExponentError",
]
