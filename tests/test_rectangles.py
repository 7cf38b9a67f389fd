import numpy as np

from intersect2d.types import ImplicitLine
from intersect2d.kernel.containment import point_in_rectangle
from intersect2d.kernel.rectangles import (
    rectangle_intersects_line,
    rectangle_intersects_line_through,
    rectangle_intersects_rectangle,
    rectangle_intersects_circle,
)

LO, HI = (0.0, 0.0), (1.0, 1.0)


def test_rectangle_line_crossing_and_miss():
    # x = 0.5 crosses, x = 2 misses
    assert rectangle_intersects_line(LO, HI, (1.0, 0.0, -0.5))
    assert not rectangle_intersects_line(LO, HI, (1.0, 0.0, -2.0))
    # Same lines with flipped normals
    assert rectangle_intersects_line(LO, HI, (-1.0, 0.0, 0.5))
    assert not rectangle_intersects_line(LO, HI, (-1.0, 0.0, 2.0))


def test_rectangle_line_touching_corner():
    """x + y = 2 only touches the corner (1, 1)."""
    assert rectangle_intersects_line(LO, HI, (1.0, 1.0, -2.0))
    assert not rectangle_intersects_line(LO, HI, (1.0, 1.0, -2.001))
    # Anti-diagonal through the box
    assert rectangle_intersects_line(LO, HI, (1.0, -1.0, 0.0))


def test_rectangle_line_two_point_form():
    assert rectangle_intersects_line_through(LO, HI, (-1.0, -1.0), (2.0, 2.0))
    assert not rectangle_intersects_line_through(LO, HI, (-1.0, 3.0), (3.0, 3.0))

    rng = np.random.default_rng(11)
    for _ in range(200):
        p0, p1 = rng.uniform(-2.0, 3.0, size=(2, 2))
        expected = rectangle_intersects_line(LO, HI, ImplicitLine.from_points(p0, p1))
        assert rectangle_intersects_line_through(LO, HI, p0, p1) == expected


def test_rectangle_rectangle():
    assert rectangle_intersects_rectangle(LO, HI, (0.5, 0.5), (2.0, 2.0))
    # Shared edge counts
    assert rectangle_intersects_rectangle(LO, HI, (1.0, 0.0), (2.0, 1.0))
    # Containment
    assert rectangle_intersects_rectangle(LO, HI, (0.25, 0.25), (0.75, 0.75))
    assert rectangle_intersects_rectangle((0.25, 0.25), (0.75, 0.75), LO, HI)
    # Separated on one axis only
    assert not rectangle_intersects_rectangle(LO, HI, (1.5, 0.0), (2.0, 1.0))
    assert not rectangle_intersects_rectangle(LO, HI, (0.0, -2.0), (1.0, -0.5))


def test_rectangle_circle_corner_region():
    """Center (2, 2) is at squared distance 2 from the corner (1, 1)."""
    assert rectangle_intersects_circle(LO, HI, (2.0, 2.0), 2.0)
    assert not rectangle_intersects_circle(LO, HI, (2.0, 2.0), 1.99)


def test_rectangle_circle_edge_region():
    assert rectangle_intersects_circle(LO, HI, (0.5, -0.5), 0.25)
    assert not rectangle_intersects_circle(LO, HI, (0.5, -0.5), 0.24)
    assert rectangle_intersects_circle(LO, HI, (-3.0, 0.5), 9.0)


def test_zero_radius_circle_inside_rectangle():
    """A point inside the rectangle always meets a zero-radius circle there."""
    rng = np.random.default_rng(5)
    lo, hi = np.array([-2.0, 1.0]), np.array([3.0, 4.0])
    for p in rng.uniform(-4.0, 6.0, size=(300, 2)):
        if point_in_rectangle(p, lo, hi):
            assert rectangle_intersects_circle(lo, hi, p, 0.0)
        else:
            assert not rectangle_intersects_circle(lo, hi, p, 0.0)
