"""Small 2D vector helpers used by the envelope curves."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Vec2", "lerp", "inverse_lerp", "bezier_quadratic"]


@dataclass(frozen=True)
class Vec2:
    """A point in the plane."""

    x: float
    y: float


def lerp(p0: Vec2, p1: Vec2, t: float) -> Vec2:
    """Linear interpolation between two points; t=0 gives p0, t=1 gives p1."""
    return Vec2((1.0 - t) * p0.x + t * p1.x, (1.0 - t) * p0.y + t * p1.y)


def inverse_lerp(start: float, end: float, value: float) -> float:
    """Return the parameter t for which lerp(start, end, t) == value."""
    return (value - start) / (end - start)


def bezier_quadratic(p0: Vec2, p1: Vec2, p2: Vec2, t: float) -> Vec2:
    """Evaluate a quadratic Bezier curve with control point p1 at t."""
    return lerp(lerp(p0, p1, t), lerp(p1, p2, t), t)