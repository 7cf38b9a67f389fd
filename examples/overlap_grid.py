# examples/overlap_grid.py
# Coarse occupancy grid: mark cells overlapped by a circle and a triangle.
import numpy as np
from intersect2d import Aar, Circle, Triangle, overlaps

circle = Circle((2.5, 2.5), 1.2)
tri = Triangle((5.0, 0.5), (7.5, 0.5), (6.0, 4.0)).ccw()

rows = []
for iy in reversed(range(5)):
    row = ""
    for ix in range(8):
        cell = Aar((float(ix), float(iy)), (ix + 1.0, iy + 1.0))
        if overlaps(cell, circle):
            row += "o"
        elif overlaps(Circle(cell.center, 0.5 * np.sqrt(2.0)), tri):
            # cell's bounding circle
            row += "^"
        else:
            row += "."
    rows.append(row)

print("\n".join(rows))
