# MIT License (see LICENSE)
"""
Circle-circle intersection.

Both circles are given by center and squared radius. The boundaries of two
intersecting circles meet on the radical line, perpendicular to the center
axis at fraction h of the center distance:

    h    = 1/2 + (rA² - rB²) / (2 d²)
    ri²  = rA² - h² d²

The circles intersect iff ri² >= 0; ri is then half the length of the
common chord and a + h * (b - a) is its midpoint.

The centers must not coincide: d² = 0 divides by zero and the result is
undefined (raises ZeroDivisionError or yields NaN, depending on the
input types).
"""
from __future__ import annotations
import math

import numpy as np

from ..util import Vec2


def _radical_projection(
    a_x: float,
    a_y: float,
    radius_squared_a: float,
    b_x: float,
    b_y: float,
    radius_squared_b: float,
) -> tuple[float, float, float, float]:
    dx = b_x - a_x
    dy = b_y - a_y
    dist_squared = dx * dx + dy * dy
    h = 0.5 + (radius_squared_a - radius_squared_b) / (2.0 * dist_squared)
    ri_squared = radius_squared_a - h * h * dist_squared
    return dx, dy, h, ri_squared


def circle_intersects_circle(center_a: Vec2, radius_squared_a: float, center_b: Vec2, radius_squared_b: float) -> bool:
    """
    Test whether two circles intersect.

    Containment of one circle in the other without touching boundaries is
    not an intersection of the boundaries and reports False.

    Args:
        center_a: Center of circle A [x, y].
        radius_squared_a: Squared radius of circle A.
        center_b: Center of circle B [x, y]; must differ from center_a.
        radius_squared_b: Squared radius of circle B.
    """
    _, _, _, ri_squared = _radical_projection(
        float(center_a[0]), float(center_a[1]), radius_squared_a,
        float(center_b[0]), float(center_b[1]), radius_squared_b,
    )
    return ri_squared >= 0.0


def circle_circle_intersection(
    center_a: Vec2,
    radius_squared_a: float,
    center_b: Vec2,
    radius_squared_b: float,
) -> tuple[np.ndarray, float] | None:
    """
    Intersect the boundaries of two circles.

    Returns:
        (lens_center, half_length) where lens_center is the midpoint of the
        common chord and half_length is half its length (0 for touching
        circles), or None if the boundaries do not meet.
    """
    a_x, a_y = float(center_a[0]), float(center_a[1])
    dx, dy, h, ri_squared = _radical_projection(
        a_x, a_y, radius_squared_a,
        float(center_b[0]), float(center_b[1]), radius_squared_b,
    )
    if ri_squared < 0.0:
        return None
    lens_center = np.array([a_x + h * dx, a_y + h * dy], dtype=np.float64)
    return lens_center, math.sqrt(ri_squared)
