# MIT License (see LICENSE)
"""
Ray casting against polygon edges.

Each edge is tested with the same determinant solve as
lines.ray_intersects_segment. The polygon may be convex or concave and of
either winding; only its raw edges are used.
"""
from __future__ import annotations

import numpy as np

from ..util import Vec2, Vertices, f64


def _as_vertex_array(vertices: Vertices) -> np.ndarray:
    verts = f64(vertices)
    if verts.ndim == 1:
        verts = verts.reshape(-1, 2)
    return verts


def polygon_ray_intersection(
    vertices: Vertices,
    origin: Vec2,
    direction: Vec2,
) -> tuple[int, np.ndarray | None]:
    """
    Find the polygon edge first hit by a ray.

    Edges are visited starting with the closing edge (last vertex to first),
    then in vertex order. Edge i runs from vertex i to vertex (i + 1) % n.

    Args:
        vertices: Polygon vertices as [N, 2] array-like or a flat
                  [x0, y0, x1, y1, ...] sequence.
        origin: Ray origin [x, y].
        direction: Ray direction [dx, dy], not necessarily normalized.

    Returns:
        Tuple (edge_index, point) for the nearest hit with t >= 0, or
        (-1, None) if the ray misses every edge. On equal distances the edge
        visited first wins. Edges parallel to the ray are never hit.
    """
    verts = _as_vertex_array(vertices)
    count = len(verts)
    if count == 0:
        return -1, None
    ox, oy = float(origin[0]), float(origin[1])
    dx, dy = float(direction[0]), float(direction[1])

    nearest_t = float("inf")
    edge_index = -1
    ax, ay = float(verts[count - 1, 0]), float(verts[count - 1, 1])
    for i in range(count):
        bx, by = float(verts[i, 0]), float(verts[i, 1])
        doa_x, doa_y = ox - ax, oy - ay
        dba_x, dba_y = bx - ax, by - ay
        det = dba_y * dx - dba_x * dy
        if det != 0.0:
            inv_det = 1.0 / det
            t = (dba_x * doa_y - dba_y * doa_x) * inv_det
            if 0.0 <= t < nearest_t:
                t2 = (doa_y * dx - doa_x * dy) * inv_det
                if 0.0 <= t2 <= 1.0:
                    # Edge starts at the previous vertex
                    edge_index = (i - 1 + count) % count
                    nearest_t = t
        ax, ay = bx, by

    if edge_index < 0:
        return -1, None
    return edge_index, np.array([ox + nearest_t * dx, oy + nearest_t * dy], dtype=np.float64)
