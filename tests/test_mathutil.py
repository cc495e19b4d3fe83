import math

import pytest

from midisynth.mathutil import Vec2, bezier_quadratic, inverse_lerp, lerp


P0 = Vec2(0.0, 1.0)
P1 = Vec2(2.0, 5.0)
P2 = Vec2(6.0, -3.0)


def test_vec2_equality():
    assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)
    assert not (Vec2(1.0, 2.0) == Vec2(2.0, 1.0))


def test_lerp_endpoints():
    assert lerp(P0, P1, 0.0) == P0
    assert lerp(P0, P1, 1.0) == P1


def test_lerp_midpoint_is_average():
    mid = lerp(P0, P2, 0.5)
    assert mid.x == pytest.approx((P0.x + P2.x) / 2)
    assert mid.y == pytest.approx((P0.y + P2.y) / 2)


def test_inverse_lerp_value():
    assert inverse_lerp(2.0, 4.0, 3.0) == pytest.approx(0.5)


@pytest.mark.parametrize("t", [0.0, 0.25, 0.6, 1.0])
def test_inverse_lerp_round_trip(t):
    point = lerp(P0, P2, t)
    assert inverse_lerp(P0.x, P2.x, point.x) == pytest.approx(t)


def test_inverse_lerp_zero_span_raises():
    with pytest.raises(ZeroDivisionError):
        inverse_lerp(1.0, 1.0, 1.0)


def test_bezier_endpoints():
    assert bezier_quadratic(P0, P1, P2, 0.0) == P0
    assert bezier_quadratic(P0, P1, P2, 1.0) == P2


@pytest.mark.parametrize("t", [0.1, 0.5, 0.9])
def test_bezier_with_middle_control_point_is_straight(t):
    middle = lerp(P0, P2, 0.5)
    curve = bezier_quadratic(P0, middle, P2, t)
    line = lerp(P0, P2, t)
    assert math.isclose(curve.x, line.x)
    assert math.isclose(curve.y, line.y)