import itertools
import logging
import math

import pytest

from unitsafe.core.dimensions import (
    AREA,
    FORCE,
    LENGTH,
    MASS,
    NUMBER,
    TIME,
    VELOCITY,
    VOLUME,
    Dimension,
    sqrt,
)
from unitsafe.core.errors import LengthMismatchError, UnknownConversionError
from unitsafe.core.rational import Rational
from unitsafe.units.conversion import DEFAULT_CONVERSIONS, ConversionTable, composed_factor
from unitsafe.units.systems import CGS, IMPERIAL, SI, UnitSystem

SYSTEMS = [SI, CGS, IMPERIAL]
DIMS = [NUMBER, LENGTH, MASS, TIME, AREA, VOLUME, VELOCITY, FORCE, sqrt(LENGTH), Dimension([Rational(2, 3), -1, 2])]


# --- systems -------------------------------------------------------------------

def test_predefined_systems():
    assert tuple(SI) == ("kg", "m", "s")
    assert tuple(CGS) == ("g", "cm", "s")
    assert tuple(IMPERIAL) == ("lb", "ft", "s")
    assert SI[1] == "m"
    assert len(SI) == 3
    assert str(IMPERIAL) == "Imperial"


def test_user_defined_system():
    mks_mm = UnitSystem("mm-system", ["kg", "mm", "s"])
    assert mks_mm.base_units == ("kg", "mm", "s")
    assert mks_mm == UnitSystem("mm-system", ("kg", "mm", "s"))


@pytest.mark.parametrize("units", [(), ("kg", "", "s"), ("kg", 1, "s")])
def test_invalid_systems_rejected(units):
    with pytest.raises((ValueError, TypeError)):
        UnitSystem("bad", units)


# --- conversion table ----------------------------------------------------------

def test_base_factor_forward_reverse_and_identity():
    assert DEFAULT_CONVERSIONS.base_factor("m", "cm") == 0.01
    assert DEFAULT_CONVERSIONS.base_factor("cm", "m") == pytest.approx(100.0)
    assert DEFAULT_CONVERSIONS.base_factor("s", "s") == 1.0
    assert DEFAULT_CONVERSIONS.base_factor("furlong", "furlong") == 1.0


def test_derived_gram_pound_entry():
    assert DEFAULT_CONVERSIONS.base_factor("g", "lb") == pytest.approx(453.592)


def test_unknown_pair_raises():
    with pytest.raises(UnknownConversionError) as excinfo:
        DEFAULT_CONVERSIONS.base_factor("m", "furlong")
    assert excinfo.value.unit_a == "m"
    assert "furlong" in str(excinfo.value)
    # also usable as a KeyError
    with pytest.raises(KeyError):
        DEFAULT_CONVERSIONS.base_factor("furlong", "m")


def test_unknown_pair_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="unitsafe.units.conversion"):
        with pytest.raises(UnknownConversionError):
            DEFAULT_CONVERSIONS.base_factor("m", "parsec")
    assert "parsec" in caplog.text


def test_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CONVERSIONS[("m", "mm")] = 0.001  # type: ignore[index]
    assert ("m", "cm") in DEFAULT_CONVERSIONS
    assert len(DEFAULT_CONVERSIONS) > 0


@pytest.mark.parametrize("factor", [0.0, -1.0, float("inf"), float("nan")])
def test_table_rejects_bad_factors(factor):
    with pytest.raises(ValueError):
        ConversionTable({("m", "mm"): factor})


def test_extended_returns_new_table():
    table = DEFAULT_CONVERSIONS.extended({("m", "mm"): 0.001})
    assert table.base_factor("mm", "m") == pytest.approx(1000.0)
    assert ("m", "mm") not in DEFAULT_CONVERSIONS


# --- composed factors --------------------------------------------------------

def test_same_system_factor_is_exactly_one():
    for system in SYSTEMS:
        assert composed_factor(FORCE, system, system) == 1.0


def test_area_from_si_to_imperial():
    assert composed_factor(AREA, SI, IMPERIAL) == pytest.approx(0.3048 ** -2)


def test_length_from_cgs_to_si():
    assert composed_factor(LENGTH, CGS, SI) == 0.01


def test_force_from_si_to_cgs():
    # 1 N = 1e5 dyn
    assert composed_factor(FORCE, SI, CGS) == pytest.approx(1e5)


def test_fractional_exponent():
    assert composed_factor(sqrt(AREA), SI, CGS) == pytest.approx(100.0)
    assert composed_factor(sqrt(LENGTH), SI, CGS) == pytest.approx(10.0)


@pytest.mark.parametrize("dim", DIMS)
@pytest.mark.parametrize("s1,s2", list(itertools.permutations(SYSTEMS, 2)))
def test_round_trip_factor_is_one(dim, s1, s2):
    there = composed_factor(dim, s1, s2)
    back = composed_factor(dim, s2, s1)
    assert math.isclose(there * back, 1.0, rel_tol=1e-12)


def test_unused_axes_need_no_entry():
    odd = UnitSystem("odd", ("stone", "m", "s"))
    # mass axis unused: no ("kg", "stone") entry required
    assert composed_factor(LENGTH, odd, SI) == 1.0
    with pytest.raises(UnknownConversionError):
        composed_factor(MASS, odd, SI)


def test_custom_table():
    mm = UnitSystem("mm", ("kg", "mm", "s"))
    table = DEFAULT_CONVERSIONS.extended({("m", "mm"): 0.001})
    assert composed_factor(AREA, mm, SI, table) == pytest.approx(1e-6)


def test_dimension_system_length_mismatch():
    with pytest.raises(LengthMismatchError):
        composed_factor(Dimension([0, 1, 0, 0]), SI, CGS)
    # same-system shortcut still checks the axis count
    with pytest.raises(LengthMismatchError):
        composed_factor(Dimension([1, 1]), SI, SI)
    with pytest.raises(LengthMismatchError):
        composed_factor(LENGTH, SI, UnitSystem("two-axis", ("kg", "m")))
