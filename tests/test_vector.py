import math

import pytest

from verletring.vector import Vec2


def test_default_is_origin():
    assert tuple(Vec2()) == (0.0, 0.0)


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(-7.0, 3.5)
    assert tuple((a + b) - b) == pytest.approx(tuple(a))


def test_negation_cancels_addition():
    a = Vec2(4.0, -9.0)
    assert tuple(a + (-a)) == (0.0, 0.0)


def test_scalar_multiplication_is_commutative():
    a = Vec2(2.0, -3.0)
    assert a * 2.5 == 2.5 * a


def test_multiply_then_divide_round_trip():
    a = Vec2(3.25, 8.5)
    assert tuple((a * 7.0) / 7.0) == pytest.approx(tuple(a))


def test_length_of_pythagorean_vector():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("x, y", [(3.0, 4.0), (-1.0, 0.0), (0.001, -250.0)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vec2(x, y)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert tuple(n * v.length()) == pytest.approx((x, y))


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalized()


def test_vectors_are_immutable():
    v = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v.x == 1.0
    assert tuple(v) == (1.0, 2.0)


def test_length_is_scaled_by_scalar():
    v = Vec2(-2.0, 6.0)
    assert (v * 3.0).length() == pytest.approx(3.0 * v.length())
    assert math.isclose((-v).length(), v.length())