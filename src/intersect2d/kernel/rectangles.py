# MIT License (see LICENSE)
"""
Axis-aligned rectangle (AAR) overlap tests.

Rectangles are passed as their min and max corners and must satisfy
min <= max on both axes; this is not validated. All tests treat the
rectangle as closed, so touching shapes intersect.
"""
from __future__ import annotations

from ..types import ImplicitLine
from ..util import LineCoeffs, Vec2


def rectangle_intersects_line(min_corner: Vec2, max_corner: Vec2, line: LineCoeffs) -> bool:
    """
    Test whether a line a*x + b*y + c = 0 intersects a rectangle.

    Only the two corners extremal along the normal (a, b) are evaluated:
    the line crosses the rectangle iff they lie on opposite sides (or on it).

    Args:
        min_corner: Rectangle min corner [x, y].
        max_corner: Rectangle max corner [x, y].
        line: Line coefficients (a, b, c).
    """
    a, b, c = line
    if a > 0.0:
        px, nx = max_corner[0], min_corner[0]
    else:
        px, nx = min_corner[0], max_corner[0]
    if b > 0.0:
        py, ny = max_corner[1], min_corner[1]
    else:
        py, ny = min_corner[1], max_corner[1]
    dist_n = c + a * nx + b * ny
    dist_p = c + a * px + b * py
    return bool(dist_n <= 0.0 and dist_p >= 0.0)


def rectangle_intersects_line_through(min_corner: Vec2, max_corner: Vec2, p0: Vec2, p1: Vec2) -> bool:
    """Two-point form of rectangle_intersects_line. p0 and p1 must differ."""
    return rectangle_intersects_line(min_corner, max_corner, ImplicitLine.from_points(p0, p1))


def rectangle_intersects_rectangle(min_a: Vec2, max_a: Vec2, min_b: Vec2, max_b: Vec2) -> bool:
    """Test whether two rectangles overlap (intervals overlap on both axes)."""
    return bool(
        max_a[0] >= min_b[0] and max_a[1] >= min_b[1]
        and min_a[0] <= max_b[0] and min_a[1] <= max_b[1]
    )


def rectangle_intersects_circle(min_corner: Vec2, max_corner: Vec2, center: Vec2, radius_squared: float) -> bool:
    """
    Test whether a rectangle and a circle overlap.

    Subtracts the squared distance from the center to the rectangle, one
    axis at a time, from the remaining squared radius.

    Args:
        min_corner: Rectangle min corner [x, y].
        max_corner: Rectangle max corner [x, y].
        center: Circle center [x, y].
        radius_squared: Squared circle radius.
    """
    remaining = radius_squared
    cx, cy = center[0], center[1]
    if cx < min_corner[0]:
        d = cx - min_corner[0]
        remaining -= d * d
    elif cx > max_corner[0]:
        d = cx - max_corner[0]
        remaining -= d * d
    if cy < min_corner[1]:
        d = cy - min_corner[1]
        remaining -= d * d
    elif cy > max_corner[1]:
        d = cy - max_corner[1]
        remaining -= d * d
    return bool(remaining >= 0.0)
