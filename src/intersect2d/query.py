# MIT License (see LICENSE)
"""
Shape-level queries on top of the kernel.

Dispatches on the value types from intersect2d.types to the matching kernel
routine, the way a narrow phase dispatches on shape pairs:

    from intersect2d import Aar, Circle, Ray, overlaps, raycast

    box = Aar((0, 0), (1, 1))
    overlaps(box, Circle((1.5, 0.5), 0.6))     # True
    hit = raycast(Ray((-1, 0.5), (1, 0)), box)
    hit.t, hit.feature                         # 1.0, AarSide.MIN_X

Unsupported shape combinations raise TypeError. With the environment
variable INTERSECT2D_CHECK_PRECONDITIONS=1 the caller preconditions the
kernel silently relies on (counter-clockwise triangles, distinct circle
centers, min <= max rectangles) are verified and violations raise
ValueError.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from .constants import AarSide, SegmentRelation
from .types import Aar, Circle, ImplicitLine, Polygon, Ray, Segment, Shape2D, Triangle
from .util import Vec2, as_point, check_preconditions, norm2
from .kernel.containment import point_in_circle, point_in_rectangle, point_in_triangle
from .kernel.lines import line_intersects_circle, ray_circle_intersection, ray_intersects_segment
from .kernel.rectangles import (
    rectangle_intersects_circle,
    rectangle_intersects_line,
    rectangle_intersects_rectangle,
)
from .kernel.circles import circle_intersects_circle
from .kernel.triangles import circle_intersects_triangle, find_closest_point_on_triangle
from .kernel.slab import ray_rectangle_intersection, segment_rectangle_intersection
from .kernel.polygon import polygon_ray_intersection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RayHit:
    """
    Result of a shape-level ray cast.

    Attributes:
        t: Ray parameter of the hit, in units of the ray direction.
        point: Hit point origin + t * direction.
        feature: Shape feature that was hit: the AarSide for rectangles,
                 the edge index for polygons, 0 for segments, None for
                 circles. A ray starting inside a rectangle reports
                 t = 0 and point = origin with the side it leaves through.
    """
    t: float
    point: np.ndarray
    feature: AarSide | int | None = None


# =============================================================================
# Preconditions
# =============================================================================

def _require_valid_aar(box: Aar) -> None:
    if check_preconditions() and not box.is_valid:
        raise ValueError(f"Rectangle min {box.min} exceeds max {box.max}")


def _require_ccw(tri: Triangle) -> None:
    if check_preconditions() and not tri.is_ccw:
        raise ValueError("Circle/triangle test requires counter-clockwise triangle winding")


def _require_distinct_centers(a: Circle, b: Circle) -> None:
    if check_preconditions() and np.array_equal(a.center, b.center):
        raise ValueError("Circle/circle test requires distinct centers")


# =============================================================================
# Containment and overlap
# =============================================================================

def contains(shape: Shape2D, point: Vec2) -> bool:
    """
    Test whether a shape contains a point (boundary included).

    Raises:
        TypeError: If the shape type has no containment test.
    """
    p = as_point(point)
    if isinstance(shape, Aar):
        _require_valid_aar(shape)
        return point_in_rectangle(p, shape.min, shape.max)
    if isinstance(shape, Circle):
        return point_in_circle(p, shape.center, shape.radius_squared)
    if isinstance(shape, Triangle):
        return point_in_triangle(p, shape.v0, shape.v1, shape.v2)
    raise TypeError(f"Unsupported shape type for containment: {type(shape)}")


def _circle_circle(a: Circle, b: Circle) -> bool:
    _require_distinct_centers(a, b)
    return circle_intersects_circle(a.center, a.radius_squared, b.center, b.radius_squared)


def _aar_aar(a: Aar, b: Aar) -> bool:
    _require_valid_aar(a)
    _require_valid_aar(b)
    return rectangle_intersects_rectangle(a.min, a.max, b.min, b.max)


def _aar_circle(a: Aar, c: Circle) -> bool:
    _require_valid_aar(a)
    return rectangle_intersects_circle(a.min, a.max, c.center, c.radius_squared)


def _circle_triangle(c: Circle, t: Triangle) -> bool:
    _require_ccw(t)
    return circle_intersects_triangle(c.center, c.radius_squared, t.v0, t.v1, t.v2)


def _aar_line(a: Aar, line: ImplicitLine) -> bool:
    _require_valid_aar(a)
    return rectangle_intersects_line(a.min, a.max, line)


def _circle_line(c: Circle, line: ImplicitLine) -> bool:
    return line_intersects_circle(line, c.center, c.radius)


_OVERLAP_HANDLERS = {
    (Aar, Aar): _aar_aar,
    (Aar, Circle): _aar_circle,
    (Circle, Circle): _circle_circle,
    (Circle, Triangle): _circle_triangle,
    (Aar, ImplicitLine): _aar_line,
    (Circle, ImplicitLine): _circle_line,
}


def overlaps(a: Shape2D | ImplicitLine, b: Shape2D | ImplicitLine) -> bool:
    """
    Test whether two shapes overlap.

    Supported pairs, in either order: Aar/Aar, Aar/Circle, Circle/Circle,
    Circle/Triangle, Aar/ImplicitLine, Circle/ImplicitLine. Circle/Circle
    tests whether the boundaries meet, so a circle strictly inside another
    does not overlap it.

    Raises:
        TypeError: If the shape pair is not supported.
    """
    handler = _OVERLAP_HANDLERS.get((type(a), type(b)))
    if handler is not None:
        return handler(a, b)
    handler = _OVERLAP_HANDLERS.get((type(b), type(a)))
    if handler is not None:
        return handler(b, a)
    raise TypeError(f"Unsupported shape pair for overlap test: {type(a).__name__}, {type(b).__name__}")


# =============================================================================
# Ray casting and clipping
# =============================================================================

def raycast(ray: Ray, shape: Shape2D | Segment) -> RayHit | None:
    """
    Cast a ray against a shape and return the nearest hit.

    Supported targets: Aar, Circle, Polygon, Segment. A ray starting inside
    a rectangle or circle hits at t = 0. Rays with a zero-length direction
    never hit.

    Raises:
        TypeError: If the target type is not supported.
    """
    if not isinstance(shape, (Aar, Circle, Polygon, Segment)):
        raise TypeError(f"Unsupported shape type for ray cast: {type(shape)}")
    if norm2(ray.direction) == 0.0:
        logger.debug("Ray from %s has zero-length direction, reporting no hit", ray.origin)
        return None

    if isinstance(shape, Aar):
        _require_valid_aar(shape)
        side, span = ray_rectangle_intersection(ray.origin, ray.direction, shape.min, shape.max)
        if span is None:
            return None
        t = span[0]
        return RayHit(t=t, point=ray.point_at(t), feature=side)

    if isinstance(shape, Circle):
        # The kernel expects a unit direction; rescale t back afterwards
        length = float(np.sqrt(norm2(ray.direction)))
        span = ray_circle_intersection(ray.origin, ray.direction / length, shape.center, shape.radius_squared)
        if span is None:
            return None
        t = max(span[0], 0.0) / length
        return RayHit(t=t, point=ray.point_at(t), feature=None)

    if isinstance(shape, Polygon):
        edge, point = polygon_ray_intersection(shape.vertices, ray.origin, ray.direction)
        if point is None:
            return None
        # Recover t along the dominant direction axis
        axis = 0 if abs(ray.direction[0]) >= abs(ray.direction[1]) else 1
        t = float((point[axis] - ray.origin[axis]) / ray.direction[axis])
        return RayHit(t=t, point=point, feature=edge)

    t = ray_intersects_segment(ray.origin, ray.direction, shape.p0, shape.p1)
    if t is None:
        return None
    return RayHit(t=t, point=ray.point_at(t), feature=0)


def clip_segment(segment: Segment, box: Aar) -> tuple[SegmentRelation, tuple[float, float] | None]:
    """
    Clip a segment against a rectangle.

    See kernel.slab.segment_rectangle_intersection for the meaning of the
    returned relation and parameters.
    """
    _require_valid_aar(box)
    return segment_rectangle_intersection(segment.p0, segment.p1, box.min, box.max)


# =============================================================================
# Closest points
# =============================================================================

def closest_point(shape: Aar | Circle | Triangle, point: Vec2) -> np.ndarray:
    """
    Closest point of a (solid) shape to a query point.

    Points inside the shape are their own closest point.

    Raises:
        TypeError: If the shape type is not supported.
    """
    p = as_point(point)
    if isinstance(shape, Triangle):
        _, closest = find_closest_point_on_triangle(shape.v0, shape.v1, shape.v2, p)
        return closest
    if isinstance(shape, Aar):
        _require_valid_aar(shape)
        return np.clip(p, shape.min, shape.max)
    if isinstance(shape, Circle):
        d = p - shape.center
        dist_squared = norm2(d)
        if dist_squared <= shape.radius_squared:
            return p
        return shape.center + d * (shape.radius / np.sqrt(dist_squared))
    raise TypeError(f"Unsupported shape type for closest point: {type(shape)}")
