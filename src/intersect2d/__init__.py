# MIT License (see LICENSE)
"""
intersect2d - A stateless kernel of 2D geometry predicates.

This package provides exact decision procedures for intersection,
containment, closest-point and ray-casting queries against lines,
circles, axis-aligned rectangles, triangles and polygons.

Main entry points:
    - kernel: Pure functions on plain coordinate pairs.
    - Aar, Circle, Triangle, Polygon, Ray, Segment, ImplicitLine: Value types.
    - overlaps, contains, raycast, clip_segment, closest_point: Shape queries.

Submodules:
    - kernel: The geometry predicate kernel, one module per family.
    - constants: Classification codes (TriangleRegion, AarSide, SegmentRelation).
    - query: Shape-level dispatch on the value types.
    - profiler: Timing helpers for benchmarks.

Example:
    from intersect2d import Aar, Segment, clip_segment

    relation, t = clip_segment(Segment((-1, 0.5), (2, 0.5)), Aar((0, 0), (1, 1)))
    # relation == SegmentRelation.TWO_INTERSECTION, t == (1/3, 2/3)
"""
import logging

from .constants import AarSide, SegmentRelation, TriangleRegion
from .types import Aar, Circle, ImplicitLine, Polygon, Ray, Segment, Triangle
from .query import RayHit, clip_segment, closest_point, contains, overlaps, raycast

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Classification codes
    "AarSide",
    "SegmentRelation",
    "TriangleRegion",
    # Value types
    "Aar",
    "Circle",
    "ImplicitLine",
    "Polygon",
    "Ray",
    "Segment",
    "Triangle",
    # Shape queries
    "RayHit",
    "clip_segment",
    "closest_point",
    "contains",
    "overlaps",
    "raycast",
]
