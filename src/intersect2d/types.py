# MIT License (see LICENSE)
"""
Value types for the 2D geometry kernel.

The kernel functions in intersect2d.kernel work on plain coordinate pairs;
these types bundle those coordinates for callers that prefer an object
model and for the shape-level queries in intersect2d.query:

- ImplicitLine: coefficients (a, b, c) of a*x + b*y + c = 0
- Aar: axis-aligned rectangle given by its min and max corners
- Circle, Triangle, Polygon: closed shapes
- Ray, Segment: parametric queries, point = origin + t * direction

Every type is immutable and converts its coordinates to float64 arrays on
construction. None of them validates geometric preconditions (min <= max,
winding, non-degenerate extents); see intersect2d.query for opt-in checks.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .util import Vec2, f64, as_point, cross2


# =============================================================================
# Lines
# =============================================================================

class ImplicitLine(NamedTuple):
    """
    Line a*x + b*y + c = 0.

    (a, b) is a normal of the line and need not be unit length. Points with
    a positive signed distance lie on the side (a, b) points to.
    """
    a: float
    b: float
    c: float

    @classmethod
    def from_points(cls, p0: Vec2, p1: Vec2) -> "ImplicitLine":
        """
        Build the line through two points.

        The normal (a, b) = (y0 - y1, x1 - x0) is the direction p0 -> p1
        rotated counter-clockwise. The points must not coincide.
        """
        x0, y0 = float(p0[0]), float(p0[1])
        x1, y1 = float(p1[0]), float(p1[1])
        a = y0 - y1
        b = x1 - x0
        c = -b * y0 - a * x0
        return cls(a, b, c)

    @property
    def normal(self) -> np.ndarray:
        return np.array([self.a, self.b], dtype=np.float64)


# =============================================================================
# Shapes
# =============================================================================

@dataclass(frozen=True)
class Aar:
    """
    Axis-aligned rectangle.

    Attributes:
        min: Corner with the smallest coordinates [x, y].
        max: Corner with the largest coordinates [x, y].
    """
    min: np.ndarray
    max: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", as_point(self.min, "min"))
        object.__setattr__(self, "max", as_point(self.max, "max"))

    @classmethod
    def from_center(cls, center: Vec2, half_extents: Vec2) -> "Aar":
        """Build a rectangle from its center and (hx, hy) half extents."""
        c = as_point(center, "center")
        h = as_point(half_extents, "half_extents")
        return cls(c - h, c + h)

    @property
    def center(self) -> np.ndarray:
        return 0.5 * (self.min + self.max)

    @property
    def half_extents(self) -> np.ndarray:
        return 0.5 * (self.max - self.min)

    @property
    def is_valid(self) -> bool:
        """True if min <= max on both axes."""
        return bool(self.min[0] <= self.max[0] and self.min[1] <= self.max[1])


@dataclass(frozen=True)
class Circle:
    """
    Circle given by center and radius.

    Routines that only need containment or overlap use radius_squared.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_point(self.center, "center"))
        object.__setattr__(self, "radius", float(self.radius))

    @property
    def radius_squared(self) -> float:
        return self.radius * self.radius


@dataclass(frozen=True)
class Triangle:
    """
    Triangle given by three vertices.

    Circle/triangle tests require counter-clockwise winding; use ccw() to
    obtain a correctly wound copy.
    """
    v0: np.ndarray
    v1: np.ndarray
    v2: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "v0", as_point(self.v0, "v0"))
        object.__setattr__(self, "v1", as_point(self.v1, "v1"))
        object.__setattr__(self, "v2", as_point(self.v2, "v2"))

    @property
    def signed_area(self) -> float:
        """Signed area, positive for counter-clockwise winding."""
        return 0.5 * cross2(self.v1 - self.v0, self.v2 - self.v0)

    @property
    def is_ccw(self) -> bool:
        return self.signed_area > 0.0

    def ccw(self) -> "Triangle":
        """Return this triangle with counter-clockwise winding."""
        if self.signed_area < 0.0:
            return Triangle(self.v0, self.v2, self.v1)
        return self


@dataclass(frozen=True)
class Polygon:
    """
    Simple polygon given by its vertices.

    Attributes:
        vertices: Array [N, 2]. A flat [x0, y0, x1, y1, ...] sequence is
                  accepted too. The closing edge runs from the last vertex
                  back to the first; winding may be either way.
    """
    vertices: np.ndarray

    def __post_init__(self) -> None:
        verts = f64(self.vertices)
        if verts.ndim == 1:
            if verts.size % 2:
                raise ValueError("Flat vertex buffer must hold an even number of coordinates")
            verts = verts.reshape(-1, 2)
        if verts.ndim != 2 or verts.shape[1] != 2:
            raise ValueError(f"Polygon vertices must have shape (N, 2), got {verts.shape}")
        if len(verts) < 3:
            raise ValueError("Polygon must have at least 3 vertices")
        object.__setattr__(self, "vertices", verts)

    def edge(self, index: int) -> tuple[np.ndarray, np.ndarray]:
        """Endpoints of the edge starting at vertex `index`."""
        n = len(self.vertices)
        return self.vertices[index % n], self.vertices[(index + 1) % n]


# Union type for shape dispatch
Shape2D = Aar | Circle | Triangle | Polygon


# =============================================================================
# Rays and segments
# =============================================================================

@dataclass(frozen=True)
class Ray:
    """
    Half-line origin + t * direction, t >= 0.

    The direction need not be normalized; returned parameters are in units
    of the direction vector.
    """
    origin: np.ndarray
    direction: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", as_point(self.origin, "origin"))
        object.__setattr__(self, "direction", as_point(self.direction, "direction"))

    def point_at(self, t: float) -> np.ndarray:
        return self.origin + t * self.direction


@dataclass(frozen=True)
class Segment:
    """Line segment p0 -> p1, parameterized with t in [0, 1]."""
    p0: np.ndarray
    p1: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "p0", as_point(self.p0, "p0"))
        object.__setattr__(self, "p1", as_point(self.p1, "p1"))

    @property
    def direction(self) -> np.ndarray:
        return self.p1 - self.p0

    def point_at(self, t: float) -> np.ndarray:
        return self.p0 + t * (self.p1 - self.p0)
