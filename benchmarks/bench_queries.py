"""
Microbenchmark: time per query for each kernel family.
Run:
  python benchmarks/bench_queries.py
"""
import numpy as np
from intersect2d.kernel import (
    circle_intersects_circle,
    circle_intersects_triangle,
    find_closest_point_on_triangle,
    polygon_ray_intersection,
    ray_rectangle_intersection,
    rectangle_intersects_circle,
    segment_rectangle_intersection,
)
from intersect2d.profiler import Profiler


def run(n: int):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism

    points = rng.uniform(-2.0, 2.0, size=(n, 2))
    dirs = rng.normal(size=(n, 2))
    lo, hi = np.array([-0.5, -0.5]), np.array([0.5, 0.5])
    tri = (np.array([-1.0, -1.0]), np.array([1.0, -1.0]), np.array([0.0, 1.0]))
    # 16-gon around the origin
    angles = np.linspace(0.0, 2.0 * np.pi, 16, endpoint=False)
    poly = np.stack([np.cos(angles), np.sin(angles)], axis=1)

    for p, d in zip(points, dirs):
        with prof.section("ray_aar"):
            ray_rectangle_intersection(p, d, lo, hi)
        with prof.section("segment_aar"):
            segment_rectangle_intersection(p, p + d, lo, hi)
        with prof.section("aar_circle"):
            rectangle_intersects_circle(lo, hi, p, 0.25)
        with prof.section("circle_circle"):
            circle_intersects_circle(p, 0.25, (0.1, 0.2), 1.0)
        with prof.section("circle_triangle"):
            circle_intersects_triangle(p, 0.25, *tri)
        with prof.section("closest_triangle"):
            find_closest_point_on_triangle(*tri, p)
        with prof.section("ray_polygon16"):
            polygon_ray_intersection(poly, p, d)

    return prof.stats.summary()


if __name__ == "__main__":
    n = 20000
    summary = run(n)
    print(f"N={n} queries per family")
    for name, s in summary.items():
        print(f"  {name:18s} mean={s['mean_us']:7.2f} us  max={s['max_us']:8.2f} us  total={s['total_ms']:8.2f} ms")
