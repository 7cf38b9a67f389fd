import numpy as np

from intersect2d.kernel.containment import point_in_rectangle, point_in_circle, point_in_triangle


def test_point_in_rectangle_closed_bounds():
    lo, hi = (0.0, 0.0), (2.0, 1.0)
    assert point_in_rectangle((1.0, 0.5), lo, hi)
    # Corners and edges count as inside
    assert point_in_rectangle((0.0, 0.0), lo, hi)
    assert point_in_rectangle((2.0, 1.0), lo, hi)
    assert point_in_rectangle((2.0, 0.3), lo, hi)
    assert not point_in_rectangle((2.0 + 1e-9, 0.5), lo, hi)
    assert not point_in_rectangle((1.0, -0.1), lo, hi)


def test_point_in_circle_squared_radius():
    # 3-4-5: (3, 4) is exactly on a circle of radius 5
    assert point_in_circle((3.0, 4.0), (0.0, 0.0), 25.0)
    assert not point_in_circle((3.0, 4.0), (0.0, 0.0), 24.99)
    assert point_in_circle((11.0, 1.0), (10.0, 1.0), 1.0)


def test_point_in_triangle_either_winding():
    ccw = [(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]
    cw = [ccw[0], ccw[2], ccw[1]]
    for tri in (ccw, cw):
        assert point_in_triangle((1.0, 1.0), *tri)
        assert point_in_triangle((0.1, 3.8), *tri)
        assert not point_in_triangle((3.0, 3.0), *tri)
        assert not point_in_triangle((-0.5, 1.0), *tri)
        assert not point_in_triangle((1.0, -0.5), *tri)


def test_point_in_triangle_random_barycentric():
    """Points built from positive barycentric weights are inside."""
    rng = np.random.default_rng(3)
    v0, v1, v2 = np.array([-1.0, -2.0]), np.array([5.0, 0.5]), np.array([0.5, 4.0])
    for _ in range(100):
        w = rng.uniform(0.05, 1.0, size=3)
        w /= w.sum()
        p = w[0] * v0 + w[1] * v1 + w[2] * v2
        assert point_in_triangle(p, v0, v1, v2)
        assert point_in_triangle(p, v0, v2, v1)


def test_coordinates_accept_any_array_like():
    for point in [(0.5, 0.5), [0.5, 0.5], np.array([0.5, 0.5])]:
        assert point_in_rectangle(point, [0, 0], np.array([1.0, 1.0]))
        assert point_in_circle(point, (0, 0), 0.5)
        assert point_in_triangle(point, (0, 0), [2, 0], np.array([0.0, 2.0]))
