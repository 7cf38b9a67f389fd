# examples/segment_clip.py
# Clip line segments against a viewport rectangle.
from intersect2d import Aar, Segment, SegmentRelation, clip_segment

viewport = Aar((0.0, 0.0), (4.0, 3.0))

segments = [
    Segment((-1.0, 1.0), (5.0, 2.0)),   # crosses the whole viewport
    Segment((1.0, 1.0), (6.0, 1.0)),    # leaves through the right side
    Segment((1.0, 1.0), (2.0, 2.0)),    # fully inside
    Segment((-2.0, 5.0), (6.0, 5.0)),   # above the viewport
]

for seg in segments:
    relation, t = clip_segment(seg, viewport)
    if relation == SegmentRelation.OUTSIDE:
        print(f"{seg.p0} -> {seg.p1}: outside")
        continue
    if relation == SegmentRelation.INSIDE:
        print(f"{seg.p0} -> {seg.p1}: inside")
        continue
    t0, t1 = max(t[0], 0.0), min(t[1], 1.0)
    print(f"{seg.p0} -> {seg.p1}: {relation.name} visible {seg.point_at(t0)} -> {seg.point_at(t1)}")
