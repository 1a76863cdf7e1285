"""Intersection finder — pairwise segment crossings inside the vote box.

O(n^2) over segments; simplified strokes yield tens of segments.
"""

from __future__ import annotations

from dataclasses import dataclass

from crossmark.engine.config import ValidatorConfig
from crossmark.engine.segments import Segment
from crossmark.utils.geometry import GEOMETRY_EPS, axis_difference, dist, point_in_rect


@dataclass(frozen=True, eq=False)
class Intersection:
    x: float
    y: float
    seg1: Segment
    seg2: Segment
    angle: float  # acute crossing angle, [0, 90]

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def stroke_indices(self) -> set[int]:
        return {self.seg1.stroke_index, self.seg2.stroke_index}


def _near_stroke_endpoint(point: tuple[float, float], seg1: Segment, seg2: Segment, eps: float) -> bool:
    return any(
        dist(point, end) < eps
        for end in (seg1.stroke_start, seg1.stroke_end, seg2.stroke_start, seg2.stroke_end)
    )


def find_segment_intersection(
    seg1: Segment,
    seg2: Segment,
    config: ValidatorConfig,
) -> Intersection | None:
    """Solve P1 + t*D1 = P2 + u*D2; None when the segments do not genuinely cross."""
    dx1 = seg1.p2[0] - seg1.p1[0]
    dy1 = seg1.p2[1] - seg1.p1[1]
    dx2 = seg2.p2[0] - seg2.p1[0]
    dy2 = seg2.p2[1] - seg2.p1[1]

    det = dx1 * dy2 - dy1 * dx2
    if abs(det) < GEOMETRY_EPS:
        return None

    ox = seg2.p1[0] - seg1.p1[0]
    oy = seg2.p1[1] - seg1.p1[1]
    t = (ox * dy2 - oy * dx2) / det
    u = (ox * dy1 - oy * dx1) / det
    if t < 0 or t > 1 or u < 0 or u > 1:
        return None

    point = (seg1.p1[0] + t * dx1, seg1.p1[1] + t * dy1)

    # Only the strokes' true endpoints count, not RDP interior vertices
    if _near_stroke_endpoint(point, seg1, seg2, config.endpoint_eps):
        return None

    cross_angle = axis_difference(seg1.heading, seg2.heading)
    if cross_angle < config.min_crossing_angle_deg:
        return None

    return Intersection(x=point[0], y=point[1], seg1=seg1, seg2=seg2, angle=cross_angle)


def find_all_intersections(segments: list[Segment], config: ValidatorConfig) -> list[Intersection]:
    intersections: list[Intersection] = []
    box = config.vote_box.rect

    for i in range(len(segments)):
        for j in range(i + 1, len(segments)):
            seg1, seg2 = segments[i], segments[j]
            if (
                seg1.stroke_index == seg2.stroke_index
                and abs(seg1.segment_index - seg2.segment_index) <= 1
            ):
                continue

            inter = find_segment_intersection(seg1, seg2, config)
            if inter is not None and point_in_rect(inter.point, box):
                intersections.append(inter)

    return intersections
