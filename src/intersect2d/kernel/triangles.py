# MIT License (see LICENSE)
"""
Triangle queries: closest point and circle overlap.

find_closest_point_on_triangle follows the Voronoi-region method from
"Real-Time Collision Detection" (Ericson, 5.1.5). The regions are tested in
a fixed order (vertex 0, vertex 1, edge 0-1, vertex 2, edge 0-2, edge 1-2,
face) and the first one containing the query point wins, so points on a
region boundary always resolve to the same feature.
"""
from __future__ import annotations

import numpy as np

from ..constants import TriangleRegion
from ..util import Vec2


def find_closest_point_on_triangle(v0: Vec2, v1: Vec2, v2: Vec2, point: Vec2) -> tuple[TriangleRegion, np.ndarray]:
    """
    Find the point of a triangle closest to a query point.

    Works for either winding and for points inside the triangle, in which
    case the point itself is returned (up to rounding).

    Args:
        v0, v1, v2: Triangle vertices [x, y].
        point: Query point [x, y].

    Returns:
        Tuple (region, closest) where region tells whether the closest point
        is a vertex, lies on an edge or in the interior (face).
    """
    v0x, v0y = float(v0[0]), float(v0[1])
    v1x, v1y = float(v1[0]), float(v1[1])
    v2x, v2y = float(v2[0]), float(v2[1])
    px, py = float(point[0]), float(point[1])

    # Vertices relative to the query point
    ax, ay = v0x - px, v0y - py
    bx, by = v1x - px, v1y - py
    cx, cy = v2x - px, v2y - py
    abx, aby = bx - ax, by - ay
    acx, acy = cx - ax, cy - ay

    d1 = -(abx * ax + aby * ay)
    d2 = -(acx * ax + acy * ay)
    if d1 <= 0.0 and d2 <= 0.0:
        return TriangleRegion.VERTEX, np.array([v0x, v0y], dtype=np.float64)

    d3 = -(abx * bx + aby * by)
    d4 = -(acx * bx + acy * by)
    if d3 >= 0.0 and d4 <= d3:
        return TriangleRegion.VERTEX, np.array([v1x, v1y], dtype=np.float64)

    vc = d1 * d4 - d3 * d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
        v = d1 / (d1 - d3)
        return TriangleRegion.EDGE, np.array([v0x + abx * v, v0y + aby * v], dtype=np.float64)

    d5 = -(abx * cx + aby * cy)
    d6 = -(acx * cx + acy * cy)
    if d6 >= 0.0 and d5 <= d6:
        return TriangleRegion.VERTEX, np.array([v2x, v2y], dtype=np.float64)

    vb = d5 * d2 - d1 * d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
        w = d2 / (d2 - d6)
        return TriangleRegion.EDGE, np.array([v0x + acx * w, v0y + acy * w], dtype=np.float64)

    va = d3 * d6 - d5 * d4
    if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
        w = (d4 - d3) / ((d4 - d3) + (d5 - d6))
        return TriangleRegion.EDGE, np.array([v1x + (cx - bx) * w, v1y + (cy - by) * w], dtype=np.float64)

    # Inside the face: barycentric weights from the sub-areas
    denom = 1.0 / (va + vb + vc)
    vn = vb * denom
    wn = vc * denom
    return TriangleRegion.FACE, np.array([
        v0x + abx * vn + acx * wn,
        v0y + aby * vn + acy * wn,
    ], dtype=np.float64)


def circle_intersects_triangle(center: Vec2, radius_squared: float, v0: Vec2, v1: Vec2, v2: Vec2) -> bool:
    """
    Test whether a circle and a triangle overlap.

    The vertices must be in counter-clockwise order; clockwise input flips
    the inside test and gives wrong answers for circles inside the triangle.

    Args:
        center: Circle center [x, y].
        radius_squared: Squared circle radius.
        v0, v1, v2: Triangle vertices in counter-clockwise order.
    """
    cx, cy = float(center[0]), float(center[1])
    v0x, v0y = float(v0[0]), float(v0[1])
    v1x, v1y = float(v1[0]), float(v1[1])
    v2x, v2y = float(v2[0]), float(v2[1])

    # Any vertex inside the circle
    c1x, c1y = cx - v0x, cy - v0y
    c1sqr = c1x * c1x + c1y * c1y - radius_squared
    if c1sqr <= 0.0:
        return True
    c2x, c2y = cx - v1x, cy - v1y
    c2sqr = c2x * c2x + c2y * c2y - radius_squared
    if c2sqr <= 0.0:
        return True
    c3x, c3y = cx - v2x, cy - v2y
    c3sqr = c3x * c3x + c3y * c3y - radius_squared
    if c3sqr <= 0.0:
        return True

    # Center inside the triangle
    e1x, e1y = v1x - v0x, v1y - v0y
    e2x, e2y = v2x - v1x, v2y - v1y
    e3x, e3y = v0x - v2x, v0y - v2y
    if (e1x * c1y - e1y * c1x >= 0.0
            and e2x * c2y - e2y * c2x >= 0.0
            and e3x * c3y - e3y * c3x >= 0.0):
        return True

    # Circle crossing an edge between its endpoints
    for ex, ey, rx, ry, rsqr in (
        (e1x, e1y, c1x, c1y, c1sqr),
        (e2x, e2y, c2x, c2y, c2sqr),
        (e3x, e3y, c3x, c3y, c3sqr),
    ):
        k = rx * ex + ry * ey
        if k >= 0.0:
            length_squared = ex * ex + ey * ey
            # k / |e| is the projection, compare squared distances scaled by |e|²
            if k <= length_squared and rsqr * length_squared <= k * k:
                return True
    return False
