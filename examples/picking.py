# examples/picking.py
# Pick the first shape under a ray cast from a cursor position.
from intersect2d import Aar, Circle, Polygon, Ray, raycast

shapes = {
    "crate": Aar((2.0, -0.5), (3.0, 0.5)),
    "ball": Circle((6.0, 0.2), 0.75),
    "wall": Polygon([[4.0, -2.0], [4.5, -2.0], [4.5, 2.0], [4.0, 2.0]]),
}

ray = Ray(origin=(0.0, 0.0), direction=(1.0, 0.0))

hits = []
for name, shape in shapes.items():
    hit = raycast(ray, shape)
    if hit is not None:
        hits.append((hit.t, name, hit))

for t, name, hit in sorted(hits, key=lambda h: h[0]):
    print(f"{name:6s} t={t:6.3f} point={hit.point} feature={hit.feature!r}")

if hits:
    print("picked:", min(hits, key=lambda h: h[0])[1])
