# MIT License (see LICENSE)
"""
Point containment tests.

Boundaries are inclusive for rectangles and circles. The triangle test is
winding-agnostic; whether a point exactly on an edge counts as inside
depends on the winding and on which edge it lies.
"""
from __future__ import annotations

from ..util import Vec2


def point_in_rectangle(point: Vec2, min_corner: Vec2, max_corner: Vec2) -> bool:
    """Test whether a point lies in the closed rectangle [min, max]."""
    px, py = point[0], point[1]
    return bool(
        px >= min_corner[0] and py >= min_corner[1]
        and px <= max_corner[0] and py <= max_corner[1]
    )


def point_in_circle(point: Vec2, center: Vec2, radius_squared: float) -> bool:
    """Test whether a point lies in the closed circle. Takes the squared radius."""
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return bool(dx * dx + dy * dy <= radius_squared)


def point_in_triangle(point: Vec2, v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """
    Test whether a point lies inside a triangle of either winding.

    The point is inside when it is on the same side of all three edges,
    i.e. the three cross products have the same sign.
    """
    px, py = point[0], point[1]
    b1 = (px - v1[0]) * (v0[1] - v1[1]) - (v0[0] - v1[0]) * (py - v1[1]) < 0.0
    b2 = (px - v2[0]) * (v1[1] - v2[1]) - (v1[0] - v2[0]) * (py - v2[1]) < 0.0
    if b1 != b2:
        return False
    b3 = (px - v0[0]) * (v2[1] - v0[1]) - (v2[0] - v0[0]) * (py - v0[1]) < 0.0
    return bool(b2 == b3)
