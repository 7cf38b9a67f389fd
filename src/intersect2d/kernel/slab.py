# MIT License (see LICENSE)
"""
Ray and segment clipping against axis-aligned rectangles (slab method).

The rectangle is the intersection of an x-slab and a y-slab. For each axis
the parametric entry/exit values are computed with the reciprocal of the
direction component; the ray or segment hits the rectangle iff the two
parameter intervals overlap.

A direction component of exactly zero is not special-cased. Its reciprocal
is +inf or -inf (following the sign of the zero) and the slab bounds become
infinite, or NaN when the origin lies exactly on a slab boundary. The
reduction of the two intervals prefers the other axis' value whenever the
current one is NaN, which turns an axis-parallel ray or segment into a
correct 1D clip. All arithmetic runs on numpy float64 scalars with
warnings suppressed so that these IEEE-754 values propagate instead of
raising.
"""
from __future__ import annotations

import numpy as np

from ..constants import AarSide, SegmentRelation
from ..util import Vec2


def _slab_clip(
    ox: np.float64,
    oy: np.float64,
    dx: np.float64,
    dy: np.float64,
    min_x: np.float64,
    min_y: np.float64,
    max_x: np.float64,
    max_y: np.float64,
) -> tuple[np.float64, np.float64] | None:
    """
    Clip the line origin + t * direction against the rectangle.

    All arguments must be numpy float64 scalars, and the caller must have
    floating-point warnings suppressed.

    Returns:
        (t_near, t_far) after the NaN-preferring reduction, or None if the
        slab intervals are disjoint. t_near < t_far is not guaranteed.
    """
    inv_dx = 1.0 / dx
    inv_dy = 1.0 / dy
    if inv_dx >= 0.0:
        t_near = (min_x - ox) * inv_dx
        t_far = (max_x - ox) * inv_dx
    else:
        t_near = (max_x - ox) * inv_dx
        t_far = (min_x - ox) * inv_dx
    if inv_dy >= 0.0:
        ty_min = (min_y - oy) * inv_dy
        ty_max = (max_y - oy) * inv_dy
    else:
        ty_min = (max_y - oy) * inv_dy
        ty_max = (min_y - oy) * inv_dy
    if t_near > ty_max or ty_min > t_far:
        return None
    t_near = ty_min if (ty_min > t_near or np.isnan(t_near)) else t_near
    t_far = ty_max if (ty_max < t_far or np.isnan(t_far)) else t_far
    return t_near, t_far


def _scalars(*values: float) -> list[np.float64]:
    return [np.float64(v) for v in values]


def _nearest_side(px: float, py: float, min_x: float, min_y: float, max_x: float, max_y: float) -> AarSide:
    # Ties resolve in the order MIN_X, MIN_Y, MAX_X, MAX_Y
    side = AarSide.MIN_X
    best = abs(px - min_x)
    for candidate, dist in (
        (AarSide.MIN_Y, abs(py - min_y)),
        (AarSide.MAX_X, abs(px - max_x)),
        (AarSide.MAX_Y, abs(py - max_y)),
    ):
        if dist < best:
            best = dist
            side = candidate
    return side


def ray_intersects_rectangle(origin: Vec2, direction: Vec2, min_corner: Vec2, max_corner: Vec2) -> bool:
    """
    Test whether a ray hits a rectangle.

    The direction need not be normalized and may have a zero component.
    A ray that starts inside the rectangle hits it.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        span = _slab_clip(*_scalars(
            origin[0], origin[1], direction[0], direction[1],
            min_corner[0], min_corner[1], max_corner[0], max_corner[1],
        ))
    if span is None:
        return False
    t_near, t_far = span
    return bool(t_near < t_far and t_far >= 0.0)


def ray_rectangle_intersection(
    origin: Vec2,
    direction: Vec2,
    min_corner: Vec2,
    max_corner: Vec2,
) -> tuple[AarSide, tuple[float, float] | None]:
    """
    Intersect a ray with a rectangle.

    The side is the rectangle side nearest to the entry point
    origin + t_near * direction. If the origin is inside the rectangle the
    ray enters at the origin: t_near is reported as 0 and the side is the
    one the ray leaves through.

    Args:
        origin: Ray origin [x, y].
        direction: Ray direction [dx, dy], not necessarily normalized.
        min_corner: Rectangle min corner [x, y].
        max_corner: Rectangle max corner [x, y].

    Returns:
        Tuple (side, (t_near, t_far)) on a hit, (AarSide.NONE, None) if the
        ray misses the rectangle or the rectangle lies behind it. Rays that
        only graze a corner (t_near == t_far) miss.
    """
    ox, oy, dx, dy, min_x, min_y, max_x, max_y = _scalars(
        origin[0], origin[1], direction[0], direction[1],
        min_corner[0], min_corner[1], max_corner[0], max_corner[1],
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        span = _slab_clip(ox, oy, dx, dy, min_x, min_y, max_x, max_y)
        if span is None:
            return AarSide.NONE, None
        t_near, t_far = span
        if not (t_near < t_far and t_far >= 0.0):
            return AarSide.NONE, None
        if t_near < 0.0:
            t_near = np.float64(0.0)
            t_side = t_far
        else:
            t_side = t_near
        px = ox + t_side * dx
        py = oy + t_side * dy
    side = _nearest_side(px, py, min_x, min_y, max_x, max_y)
    return side, (float(t_near), float(t_far))


def segment_rectangle_intersection(
    p0: Vec2,
    p1: Vec2,
    min_corner: Vec2,
    max_corner: Vec2,
) -> tuple[SegmentRelation, tuple[float, float] | None]:
    """
    Intersect the line segment p0-p1 with a rectangle.

    Parameters are in segment units: t = 0 at p0 and t = 1 at p1.

    Returns:
        Tuple (relation, (t_near, t_far)):
        - TWO_INTERSECTION: the segment enters and leaves the rectangle;
        - ONE_INTERSECTION: one endpoint is inside; both parameters equal
          the single boundary crossing;
        - INSIDE: both endpoints are inside; the parameters are those of the
          supporting line and lie outside [0, 1];
        - OUTSIDE: no intersection, parameters are None.

        An endpoint lying exactly on the boundary is neither inside nor
        outside: such segments report TWO_INTERSECTION, and the parameter
        on the far side of that endpoint lies outside [0, 1]. A segment
        from the left edge into the unit box gives (0, 2); one from inside
        to the right edge gives (-1, 1).
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        p0x, p0y, p1x, p1y, min_x, min_y, max_x, max_y = _scalars(
            p0[0], p0[1], p1[0], p1[1],
            min_corner[0], min_corner[1], max_corner[0], max_corner[1],
        )
        span = _slab_clip(p0x, p0y, p1x - p0x, p1y - p0y, min_x, min_y, max_x, max_y)
    if span is None:
        return SegmentRelation.OUTSIDE, None
    t_near, t_far = span
    if not (t_near < t_far and t_near <= 1.0 and t_far >= 0.0):
        return SegmentRelation.OUTSIDE, None
    if t_near > 0.0 and t_far > 1.0:
        t_far = t_near
        relation = SegmentRelation.ONE_INTERSECTION
    elif t_near < 0.0 and t_far < 1.0:
        t_near = t_far
        relation = SegmentRelation.ONE_INTERSECTION
    elif t_near < 0.0 and t_far > 1.0:
        relation = SegmentRelation.INSIDE
    else:
        relation = SegmentRelation.TWO_INTERSECTION
    return relation, (float(t_near), float(t_far))
