# MIT License (see LICENSE)
"""
Geometry predicate kernel.

Pure functions over plain coordinate pairs, grouped by family:
    - containment: Point in rectangle, circle and triangle.
    - lines: Line/circle, point/line distance, ray/line, ray/segment, ray/circle.
    - rectangles: Rectangle/line, rectangle/rectangle, rectangle/circle.
    - circles: Circle/circle test and lens computation.
    - triangles: Closest point on a triangle, circle/triangle test.
    - slab: Ray and segment clipping against rectangles.
    - polygon: Ray casting against polygon edges.

None of these functions keeps state or validates caller preconditions; all
of them are safe to call concurrently.

Typical usage:
    from intersect2d.kernel import ray_rectangle_intersection, AarSide

    side, t = ray_rectangle_intersection((0, 0.5), (1, 0), (1, 0), (2, 1))
    if side is not AarSide.NONE:
        t_near, t_far = t
"""
from ..constants import AarSide, SegmentRelation, TriangleRegion
from .containment import point_in_rectangle, point_in_circle, point_in_triangle
from .lines import (
    line_intersects_circle,
    line_circle_intersection,
    line_circle_intersection_through,
    point_line_distance,
    point_line_distance_through,
    ray_intersects_line,
    ray_intersects_segment,
    ray_circle_intersection,
    ray_intersects_circle,
)
from .rectangles import (
    rectangle_intersects_line,
    rectangle_intersects_line_through,
    rectangle_intersects_rectangle,
    rectangle_intersects_circle,
)
from .circles import circle_intersects_circle, circle_circle_intersection
from .triangles import find_closest_point_on_triangle, circle_intersects_triangle
from .slab import (
    ray_intersects_rectangle,
    ray_rectangle_intersection,
    segment_rectangle_intersection,
)
from .polygon import polygon_ray_intersection

__all__ = [
    # Classification codes
    "AarSide",
    "SegmentRelation",
    "TriangleRegion",
    # Containment
    "point_in_rectangle",
    "point_in_circle",
    "point_in_triangle",
    # Lines
    "line_intersects_circle",
    "line_circle_intersection",
    "line_circle_intersection_through",
    "point_line_distance",
    "point_line_distance_through",
    "ray_intersects_line",
    "ray_intersects_segment",
    "ray_circle_intersection",
    "ray_intersects_circle",
    # Rectangles
    "rectangle_intersects_line",
    "rectangle_intersects_line_through",
    "rectangle_intersects_rectangle",
    "rectangle_intersects_circle",
    # Circles
    "circle_intersects_circle",
    "circle_circle_intersection",
    # Triangles
    "find_closest_point_on_triangle",
    "circle_intersects_triangle",
    # Slab method
    "ray_intersects_rectangle",
    "ray_rectangle_intersection",
    "segment_rectangle_intersection",
    # Polygons
    "polygon_ray_intersection",
]
