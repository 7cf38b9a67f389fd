# MIT License (see LICENSE)
"""
Classification codes and numeric defaults shared by the kernel.

The integer values of the enumerations are part of the public contract:
callers may store or compare them as plain ints.
"""
from __future__ import annotations
from enum import IntEnum


class TriangleRegion(IntEnum):
    """Feature of a triangle that holds the closest point to a query point."""
    VERTEX = 0
    EDGE = 1
    FACE = 2


class AarSide(IntEnum):
    """Side of an axis-aligned rectangle hit by a ray. NONE means no hit."""
    NONE = -1
    MIN_X = 0
    MIN_Y = 1
    MAX_X = 2
    MAX_Y = 3


class SegmentRelation(IntEnum):
    """How a line segment relates to an axis-aligned rectangle."""
    OUTSIDE = -1
    ONE_INTERSECTION = 1
    TWO_INTERSECTION = 2
    INSIDE = 3


# Default threshold for ray_intersects_line: the ray must satisfy
# dot(normal, direction) < epsilon to be considered approaching the line.
RAY_LINE_EPSILON: float = 1e-6

# Environment switch enabling precondition checks in the shape layer.
CHECK_PRECONDITIONS_ENV: str = "INTERSECT2D_CHECK_PRECONDITIONS"
