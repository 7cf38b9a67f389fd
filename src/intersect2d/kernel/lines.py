# MIT License (see LICENSE)
"""
Line, ray and circle primitives.

Lines are given in implicit form a*x + b*y + c = 0, either as an
ImplicitLine or any (a, b, c) triple. The `*_through` variants take two
points on the line instead and derive the coefficients with
ImplicitLine.from_points, so both forms give identical results.

Radius conventions:
- line/circle routines take the true radius (they need a distance anyway);
- ray/circle routines take the squared radius.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import RAY_LINE_EPSILON
from ..types import ImplicitLine
from ..util import LineCoeffs, Vec2


def line_intersects_circle(line: LineCoeffs, center: Vec2, radius: float) -> bool:
    """
    Test whether a line intersects (or touches) a circle.

    Args:
        line: Line coefficients (a, b, c).
        center: Circle center [x, y].
        radius: Circle radius (not squared).

    Returns:
        True if the distance from the center to the line is at most radius.
    """
    a, b, c = line
    denom = math.sqrt(a * a + b * b)
    dist = (a * center[0] + b * center[1] + c) / denom
    return bool(-radius <= dist <= radius)


def line_circle_intersection(line: LineCoeffs, center: Vec2, radius: float) -> tuple[np.ndarray, float] | None:
    """
    Intersect a line with a circle.

    The two intersection points (if any) are symmetric about the chord
    center, at +/- half_length along the line direction.

    Args:
        line: Line coefficients (a, b, c).
        center: Circle center [x, y].
        radius: Circle radius (not squared).

    Returns:
        (chord_center, half_length) if the line intersects the circle,
        None otherwise. A tangent line yields half_length 0.
    """
    a, b, c = line
    inv_denom = 1.0 / math.sqrt(a * a + b * b)
    cx, cy = float(center[0]), float(center[1])
    dist = (a * cx + b * cy + c) * inv_denom
    if -radius <= dist <= radius:
        # Foot of the perpendicular from the center onto the line
        chord_center = np.array([
            cx - dist * a * inv_denom,
            cy - dist * b * inv_denom,
        ], dtype=np.float64)
        half_length = math.sqrt(radius * radius - dist * dist)
        return chord_center, half_length
    return None


def line_circle_intersection_through(
    p0: Vec2,
    p1: Vec2,
    center: Vec2,
    radius: float,
) -> tuple[np.ndarray, float] | None:
    """Two-point form of line_circle_intersection. p0 and p1 must differ."""
    return line_circle_intersection(ImplicitLine.from_points(p0, p1), center, radius)


def point_line_distance(point: Vec2, line: LineCoeffs) -> float:
    """
    Signed distance from a point to a line.

    Positive on the side the normal (a, b) points to, negative on the other.
    """
    a, b, c = line
    denom = math.sqrt(a * a + b * b)
    return float((a * point[0] + b * point[1] + c) / denom)


def point_line_distance_through(point: Vec2, p0: Vec2, p1: Vec2) -> float:
    """
    Signed distance from a point to the line through p0 and p1.

    Points to the left of the direction p0 -> p1 have positive distance.
    """
    return point_line_distance(point, ImplicitLine.from_points(p0, p1))


def ray_intersects_line(
    origin: Vec2,
    direction: Vec2,
    point: Vec2,
    normal: Vec2,
    epsilon: float = RAY_LINE_EPSILON,
) -> float | None:
    """
    Intersect a ray with a line given by a point on it and its normal.

    Only rays travelling against the normal hit: dot(normal, direction) must
    be below epsilon. Rays parallel to the line, or moving away from its
    front side, never intersect. Negate the normal to hit back faces.

    Args:
        origin: Ray origin [x, y].
        direction: Ray direction [dx, dy], not necessarily normalized.
        point: Any point on the line.
        normal: Line normal (front side).
        epsilon: Threshold on dot(normal, direction).

    Returns:
        Ray parameter t >= 0 of the intersection, or None.
    """
    denom = normal[0] * direction[0] + normal[1] * direction[1]
    if denom < epsilon and denom != 0.0:
        t = ((point[0] - origin[0]) * normal[0] + (point[1] - origin[1]) * normal[1]) / denom
        if t >= 0.0:
            return float(t)
    return None


def ray_intersects_segment(origin: Vec2, direction: Vec2, a: Vec2, b: Vec2) -> float | None:
    """
    Intersect a ray with the line segment a-b.

    Solves origin + t * direction = a + t2 * (b - a).

    Returns:
        Ray parameter t if t >= 0 and 0 <= t2 <= 1, None otherwise. Rays
        parallel to the segment (zero determinant) never intersect.
    """
    v1x = origin[0] - a[0]
    v1y = origin[1] - a[1]
    v2x = b[0] - a[0]
    v2y = b[1] - a[1]
    det = v2y * direction[0] - v2x * direction[1]
    if det == 0.0:
        return None
    inv_det = 1.0 / det
    t1 = (v2x * v1y - v2y * v1x) * inv_det
    t2 = (v1y * direction[0] - v1x * direction[1]) * inv_det
    if t1 >= 0.0 and 0.0 <= t2 <= 1.0:
        return float(t1)
    return None


def _ray_circle_span(origin: Vec2, direction: Vec2, center: Vec2, radius_squared: float) -> tuple[float, float] | None:
    lx = center[0] - origin[0]
    ly = center[1] - origin[1]
    tca = lx * direction[0] + ly * direction[1]
    d2 = lx * lx + ly * ly - tca * tca
    if d2 > radius_squared:
        return None
    thc = math.sqrt(radius_squared - d2)
    t0 = tca - thc
    t1 = tca + thc
    if t0 < t1 and t1 >= 0.0:
        return float(t0), float(t1)
    return None


def ray_circle_intersection(
    origin: Vec2,
    direction: Vec2,
    center: Vec2,
    radius_squared: float,
) -> tuple[float, float] | None:
    """
    Intersect a ray with a circle.

    The direction must be unit length: the perpendicular distance is derived
    from the projection onto it.

    Args:
        origin: Ray origin [x, y].
        direction: Normalized ray direction.
        center: Circle center [x, y].
        radius_squared: Squared circle radius.

    Returns:
        (t0, t1) entry and exit parameters if the ray crosses the circle and
        t1 >= 0, None otherwise. t0 is negative when the origin is inside.
        A tangent ray (t0 == t1) is not reported.
    """
    return _ray_circle_span(origin, direction, center, radius_squared)


def ray_intersects_circle(origin: Vec2, direction: Vec2, center: Vec2, radius_squared: float) -> bool:
    """Boolean form of ray_circle_intersection. Direction must be unit length."""
    return _ray_circle_span(origin, direction, center, radius_squared) is not None
