import numpy as np
import pytest

from intersect2d.constants import AarSide, SegmentRelation
from intersect2d.kernel.slab import (
    ray_intersects_rectangle,
    ray_rectangle_intersection,
    segment_rectangle_intersection,
)

LO, HI = (0.0, 0.0), (1.0, 1.0)


@pytest.mark.parametrize("origin, direction, side, t", [
    ((-1.0, 0.5), (1.0, 0.0), AarSide.MIN_X, (1.0, 2.0)),
    ((0.5, -1.0), (0.0, 1.0), AarSide.MIN_Y, (1.0, 2.0)),
    ((3.0, 0.5), (-1.0, 0.0), AarSide.MAX_X, (2.0, 3.0)),
    ((0.5, 3.0), (0.0, -2.0), AarSide.MAX_Y, (1.0, 1.5)),
])
def test_ray_enters_each_side(origin, direction, side, t):
    got_side, got_t = ray_rectangle_intersection(origin, direction, LO, HI)
    assert got_side == side
    assert got_t == pytest.approx(t)
    assert ray_intersects_rectangle(origin, direction, LO, HI)


def test_ray_starting_inside():
    """The ray enters at its origin and leaves through the max-x side."""
    side, t = ray_rectangle_intersection((0.5, 0.5), (1.0, 0.0), LO, HI)
    assert side == AarSide.MAX_X
    t_near, t_far = t
    assert t_near == pytest.approx(0.0)
    assert t_far == pytest.approx(0.5)
    assert ray_intersects_rectangle((0.5, 0.5), (1.0, 0.0), LO, HI)


def test_ray_behind_or_beside():
    # Box entirely behind the origin
    assert ray_rectangle_intersection((2.0, 0.5), (1.0, 0.0), LO, HI) == (AarSide.NONE, None)
    assert not ray_intersects_rectangle((2.0, 0.5), (1.0, 0.0), LO, HI)
    # Axis-parallel ray passing above
    assert ray_rectangle_intersection((-1.0, 2.0), (1.0, 0.0), LO, HI) == (AarSide.NONE, None)
    assert not ray_intersects_rectangle((-1.0, 2.0), (1.0, 0.0), LO, HI)
    # Diagonal ray missing the box
    assert not ray_intersects_rectangle((-1.0, 0.0), (1.0, 2.0), (1.0, 0.0), (2.0, 1.0))


def test_ray_grazing_corner_misses():
    """y = -x only touches the corner (0, 0): t_near == t_far is no hit."""
    assert ray_rectangle_intersection((-1.0, 1.0), (1.0, -1.0), LO, HI) == (AarSide.NONE, None)
    assert not ray_intersects_rectangle((-1.0, 1.0), (1.0, -1.0), LO, HI)


def test_ray_through_corner_prefers_min_x():
    side, t = ray_rectangle_intersection((-1.0, -1.0), (1.0, 1.0), LO, HI)
    assert side == AarSide.MIN_X
    assert t == pytest.approx((1.0, 2.0))


def test_ray_on_slab_boundary_uses_other_axis():
    """
    Origin exactly on x = min_x with zero x-direction: the x-slab entry is
    0 * inf = NaN and must give way to the y-slab value.
    """
    side, t = ray_rectangle_intersection((0.0, -1.0), (0.0, 1.0), LO, HI)
    assert side == AarSide.MIN_X
    assert t == pytest.approx((1.0, 2.0))
    assert not np.isnan(t[0])
    assert ray_intersects_rectangle((0.0, -1.0), (0.0, 1.0), LO, HI)


def test_ray_negative_zero_direction():
    side, t = ray_rectangle_intersection((0.5, -1.0), (-0.0, 1.0), LO, HI)
    assert side == AarSide.MIN_Y
    assert t == pytest.approx((1.0, 2.0))


def test_ray_accepts_numpy_inputs():
    side, t = ray_rectangle_intersection(
        np.array([-2.0, 0.25]), np.array([4.0, 0.0]), np.array([-1.0, 0.0]), np.array([1.0, 1.0])
    )
    assert side == AarSide.MIN_X
    assert t == pytest.approx((0.25, 0.75))
    assert isinstance(t[0], float)


def test_segment_two_intersections():
    relation, t = segment_rectangle_intersection((-1.0, 0.5), (2.0, 0.5), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((1.0 / 3.0, 2.0 / 3.0))


def test_segment_entering_only():
    relation, t = segment_rectangle_intersection((-1.0, 0.5), (0.5, 0.5), LO, HI)
    assert relation == SegmentRelation.ONE_INTERSECTION
    assert t == pytest.approx((2.0 / 3.0, 2.0 / 3.0))


def test_segment_leaving_only():
    relation, t = segment_rectangle_intersection((0.5, 0.5), (2.0, 0.5), LO, HI)
    assert relation == SegmentRelation.ONE_INTERSECTION
    assert t == pytest.approx((1.0 / 3.0, 1.0 / 3.0))


def test_segment_inside():
    relation, t = segment_rectangle_intersection((0.25, 0.5), (0.75, 0.5), LO, HI)
    assert relation == SegmentRelation.INSIDE
    assert t == pytest.approx((-0.5, 1.5))


def test_segment_outside():
    # Stops short of the box
    assert segment_rectangle_intersection((-2.0, 0.5), (-1.0, 0.5), LO, HI) == (SegmentRelation.OUTSIDE, None)
    # Starts past the box
    assert segment_rectangle_intersection((2.0, 0.5), (3.0, 0.5), LO, HI) == (SegmentRelation.OUTSIDE, None)
    # Parallel above the box
    assert segment_rectangle_intersection((-1.0, 2.0), (2.0, 2.0), LO, HI) == (SegmentRelation.OUTSIDE, None)


def test_segment_along_box_edge():
    """Vertical segment lying on x = max_x clips to the y extent of the box."""
    relation, t = segment_rectangle_intersection((1.0, -1.0), (1.0, 2.0), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((1.0 / 3.0, 2.0 / 3.0))


def test_segment_starting_on_boundary():
    relation, t = segment_rectangle_intersection((0.0, 0.5), (0.5, 0.5), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((0.0, 2.0))


def test_segment_ending_on_boundary():
    relation, t = segment_rectangle_intersection((0.5, 0.5), (1.0, 0.5), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((-1.0, 1.0))


def test_segment_edge_to_edge():
    relation, t = segment_rectangle_intersection((0.0, 0.5), (1.0, 0.5), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((0.0, 1.0))
    relation, t = segment_rectangle_intersection((0.5, 1.0), (0.5, 0.0), LO, HI)
    assert relation == SegmentRelation.TWO_INTERSECTION
    assert t == pytest.approx((0.0, 1.0))
