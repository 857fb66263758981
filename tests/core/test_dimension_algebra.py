from fractions import Fraction

import pytest

from unitsafe.core.dimensions import (
    ACCELERATION,
    AREA,
    DENSITY,
    FORCE,
    FREQUENCY,
    LENGTH,
    MASS,
    NUMBER,
    TIME,
    VELOCITY,
    VOLUME,
    WORK,
    Dimension,
    dimensionless,
    divide,
    int_dim,
    invert,
    multiply,
    power,
    sqrt,
)
from unitsafe.core.errors import IrrationalExponentError, LengthMismatchError
from unitsafe.core.rational import ZERO, Rational

ALL_NAMED = [NUMBER, MASS, LENGTH, TIME, VELOCITY, ACCELERATION, FORCE, WORK, AREA, VOLUME, FREQUENCY, DENSITY]


# --- Basic structure ---------------------------------------------------------

def test_named_dimensions_shape_and_types():
    for d in ALL_NAMED:
        assert isinstance(d, tuple)
        assert len(d) == 3
        assert all(isinstance(x, Rational) for x in d)


def test_components_are_stored_simplified():
    d = Dimension([Rational(2, 4), Rational(-3, -3), Rational(0, 5)])
    assert tuple(d) == (Rational(1, 2), Rational(1, 1), Rational(0, 1))


def test_mixed_input_types():
    assert Dimension([1, Fraction(1, 2), 0.5]) == Dimension([Rational(1), Rational(1, 2), Rational(1, 2)])


def test_float_exponent_must_be_rational():
    with pytest.raises(IrrationalExponentError):
        Dimension([0.1234567891, 0, 0])


def test_empty_dimension_rejected():
    with pytest.raises(ValueError):
        Dimension([])


# --- Algebra -----------------------------------------------------------------

@pytest.mark.parametrize("a,b,expected", [
    (LENGTH, FORCE, WORK),
    (MASS, ACCELERATION, FORCE),
    (LENGTH, LENGTH, AREA),
    (AREA, LENGTH, VOLUME),
    (NUMBER, LENGTH, LENGTH),
])
def test_multiply(a, b, expected):
    assert multiply(a, b) == expected
    assert multiply(b, a) == expected
    assert a * b == expected


@pytest.mark.parametrize("d", ALL_NAMED + [Dimension([Rational(1, 2), -3, Rational(7, 3)])])
def test_multiply_by_inverse_is_dimensionless(d):
    assert multiply(d, invert(d)) == dimensionless()
    assert (d * ~d).is_dimensionless


def test_invert():
    assert invert(TIME) == FREQUENCY
    assert invert(NUMBER) == NUMBER


@pytest.mark.parametrize("d,r,expected", [
    (AREA, Rational(1, 2), LENGTH),
    (LENGTH, Rational(3), VOLUME),
    (LENGTH, 0, NUMBER),
    (TIME, -1, FREQUENCY),
    (VOLUME, Fraction(2, 3), AREA),
    (AREA, 0.5, LENGTH),
])
def test_power(d, r, expected):
    assert power(d, r) == expected
    assert d ** r == expected


def test_fractional_power_keeps_exact_exponents():
    half_length = power(LENGTH, Rational(1, 2))
    assert tuple(half_length) == (Rational(0), Rational(1, 2), Rational(0))
    assert multiply(half_length, half_length) == LENGTH


def test_sqrt():
    assert sqrt(AREA) == LENGTH
    assert sqrt(LENGTH) == power(LENGTH, Rational(1, 2))


def test_divide():
    assert divide(LENGTH, TIME) == VELOCITY
    assert LENGTH / TIME == VELOCITY
    assert divide(WORK, LENGTH) == FORCE
    assert (0, 1, 0) / TIME == VELOCITY


def test_mixing_axis_counts_raises():
    four_axes = Dimension([0, 1, 0, 0])
    with pytest.raises(LengthMismatchError):
        multiply(LENGTH, four_axes)


def test_extensible_axis_count():
    a = Dimension([1, 0, 0, 1])
    b = Dimension([0, 1, 0, -1])
    assert multiply(a, b) == Dimension([1, 1, 0, 0])
    assert dimensionless(4) == Dimension([0, 0, 0, 0])


def test_addition_blocked():
    with pytest.raises(TypeError):
        _ = LENGTH + MASS


# --- Equality / helpers ------------------------------------------------------

def test_equality_on_simplified_exponents():
    assert Dimension([Rational(2, 4), 0, 0]) == Dimension([Rational(1, 2), 0, 0])
    assert LENGTH != MASS
    assert hash(int_dim(0, 1, 0)) == hash(LENGTH)


def test_is_dimensionless():
    assert NUMBER.is_dimensionless
    assert not LENGTH.is_dimensionless


def test_named_constants():
    assert FORCE == int_dim(1, 1, -2)
    assert WORK == int_dim(1, 2, -2)
    assert VELOCITY == int_dim(0, 1, -1)
    assert FREQUENCY == int_dim(0, 0, -1)


def test_rendering():
    assert str(LENGTH) == "<0/1, 1/1, 0/1, end>"
    assert repr(FORCE) == "[M^1][L^1][T^-2]"
    assert repr(sqrt(LENGTH)) == "[L^(1/2)]"
    assert repr(NUMBER) == "[1]"


def test_dimensionless_components_are_zero():
    assert all(x == ZERO for x in dimensionless(5))
    assert dimensionless() == NUMBER
