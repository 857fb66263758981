# tests/conftest.py
import pytest

from unitsafe.units.registry import DEFAULT_REGISTRY as _ureg
from unitsafe.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped UnitsRegistry for isolation per test."""
    return _bootstrap_default_registry()


class Vec3:
    __slots__ = ("values",)

    def __init__(self, x, y, z):
        self.values = (x, y, z)

    def __getitem__(self, i):
        return self.values[i]

    def __len__(self):
        return 3

    def __add__(self, other):
        return Vec3(*(a + b for a, b in zip(self.values, other.values)))

    def __sub__(self, other):
        return Vec3(*(a - b for a, b in zip(self.values, other.values)))

    def __mul__(self, scalar):
        return Vec3(*(a * scalar for a in self.values))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(*(a / scalar for a in self.values))

    def __eq__(self, other):
        return isinstance(other, Vec3) and self.values == other.values

    def __str__(self):
        return "(" + ",".join(str(v) for v in self.values) + ")"


@pytest.fixture()
def vec3():
    """Aggregate payload type for Quantity/Unit values."""
    return Vec3
