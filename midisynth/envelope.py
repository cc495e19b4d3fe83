"""ADSR envelope curve built from eight control points."""

from __future__ import annotations

from typing import Sequence

from midisynth.mathutil import Vec2, bezier_quadratic, inverse_lerp, lerp

__all__ = [
    "POINT_COUNT",
    "MAX_CONTROL_Y",
    "MAX_RELEASE_X",
    "envelope_curve",
    "drag_control_point",
]

POINT_COUNT = 8
MAX_CONTROL_Y = 20.0
MAX_RELEASE_X = 10.0


def _check(control_points: Sequence[Vec2]) -> list[Vec2]:
    points = list(control_points)
    if len(points) != POINT_COUNT:
        raise ValueError(f"expected {POINT_COUNT} control points, got {len(points)}")
    return points


def _param(start: float, end: float, value: float) -> float:
    if end == start:
        return 1.0
    return inverse_lerp(start, end, value)


def envelope_curve(control_points: Sequence[Vec2], num_points: int = 5000) -> list[Vec2]:
    """Sample the attack, decay, sustain and release segments of the envelope.

    Attack, decay and release are quadratic Bezier curves; sustain is a line.
    """
    p = _check(control_points)
    if num_points < 2:
        raise ValueError("num_points must be at least 2")
    x_max = p[7].x
    curve = []
    for i in range(num_points):
        t = i / (num_points - 1) * x_max
        if t <= p[2].x:
            point = bezier_quadratic(p[0], p[1], p[2], _param(p[0].x, p[2].x, t))
        elif t <= p[4].x:
            point = bezier_quadratic(p[2], p[3], p[4], _param(p[2].x, p[4].x, t))
        elif t <= p[5].x:
            point = lerp(p[4], p[5], _param(p[4].x, p[5].x, t))
        else:
            point = bezier_quadratic(p[5], p[6], p[7], _param(p[5].x, p[7].x, t))
        curve.append(point)
    return curve


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


def drag_control_point(control_points: Sequence[Vec2], index: int, x: float, y: float) -> list[Vec2]:
    """Return the points with point index moved towards (x, y).

    x stays between its neighbours, y between 0 and MAX_CONTROL_Y, and the
    two sustain points (4 and 5) keep the same height.
    """
    points = _check(control_points)
    if not 1 <= index < POINT_COUNT:
        raise ValueError(f"control point {index} cannot be moved")
    x_max = MAX_RELEASE_X if index == POINT_COUNT - 1 else points[index + 1].x
    x_min = points[index - 1].x
    new_y = _clamp(y, 0.0, MAX_CONTROL_Y)
    points[index] = Vec2(_clamp(x, x_min, x_max), new_y)
    if index == 4:
        points[5] = Vec2(points[5].x, new_y)
    elif index == 5:
        points[4] = Vec2(points[4].x, new_y)
    return points