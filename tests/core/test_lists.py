import operator

import pytest

from unitsafe.core.errors import LengthMismatchError
from unitsafe.core.lists import StaticList, elementwise
from unitsafe.core.rational import Rational, add, simplify


def test_elementwise_pairwise_over_three_axes():
    a = StaticList([Rational(1), Rational(2), Rational(3)])
    b = StaticList([Rational(2), Rational(4), Rational(-3)])

    out = elementwise(lambda x, y: simplify(add(x, y)), a, b)

    assert out == StaticList([Rational(3), Rational(6), Rational(0)])
    assert isinstance(out, StaticList)


def test_elementwise_unary_and_ternary():
    assert elementwise(operator.neg, [1, -2, 3]) == StaticList([-1, 2, -3])
    assert elementwise(lambda x, y, z: x * y + z, [1, 2], [3, 4], [5, 6]) == StaticList([8, 14])


@pytest.mark.regression(reason="unequal lengths used to stop at the shortest list; now an error")
@pytest.mark.parametrize("a,b", [
    ([1, 2, 3], [1, 2]),
    ([1, 2], [1, 2, 3]),
    ([1], []),
])
def test_elementwise_length_mismatch_raises(a, b):
    with pytest.raises(LengthMismatchError) as excinfo:
        elementwise(operator.add, a, b)
    assert excinfo.value.lengths == (len(a), len(b))


def test_elementwise_needs_input():
    with pytest.raises(TypeError):
        elementwise(operator.add)


def test_length_and_get():
    lst = StaticList("abc")
    assert lst.length == 3
    assert lst.get(1) == "b"
    assert lst.back() == "c"


def test_push_and_pop_return_new_lists():
    lst = StaticList([1, 2, 3])

    assert lst.push_front(0) == StaticList([0, 1, 2, 3])
    assert lst.push_back(4) == StaticList([1, 2, 3, 4])
    assert lst.pop_front() == StaticList([2, 3])
    assert lst.pop_back() == StaticList([1, 2])
    assert lst == StaticList([1, 2, 3])  # untouched


@pytest.mark.parametrize("index,expected", [
    (0, [2, 3]),
    (1, [1, 3]),
    (2, [1, 2]),
    (-1, [1, 2]),
])
def test_pop_at(index, expected):
    assert StaticList([1, 2, 3]).pop_at(index) == StaticList(expected)


def test_pop_at_out_of_range():
    with pytest.raises(IndexError):
        StaticList([1, 2]).pop_at(2)


def test_empty_list_pops_raise():
    empty = StaticList()
    with pytest.raises(IndexError):
        empty.pop_front()
    with pytest.raises(IndexError):
        empty.pop_back()
    with pytest.raises(IndexError):
        empty.back()


def test_reversed_and_repeat():
    assert StaticList([1, 2, 3]).reversed() == StaticList([3, 2, 1])
    assert StaticList.repeat(3, Rational(1, 2)) == StaticList([Rational(1, 2)] * 3)
    with pytest.raises(ValueError):
        StaticList.repeat(0, 1)


def test_concatenation_and_repetition_blocked():
    lst = StaticList([1, 2])
    with pytest.raises(TypeError):
        _ = lst + lst
    with pytest.raises(TypeError):
        _ = lst * 2
    with pytest.raises(TypeError):
        _ = 2 * lst


def test_rendering_has_end_marker():
    assert str(StaticList([Rational(1), Rational(2)])) == "<1/1, 2/1, end>"
    assert str(StaticList()) == "<end>"
