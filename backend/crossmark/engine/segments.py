"""Segment builder — simplified strokes to tagged line segments."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from crossmark.utils.geometry import Point, direction_deg, dist, fold_180, midpoint


@dataclass(frozen=True)
class Segment:
    """One edge of a simplified stroke polyline."""

    p1: Point
    p2: Point
    stroke_index: int
    segment_index: int
    length: float
    # True endpoints of the source stroke, used to reject tip-to-tip touches
    stroke_start: Point
    stroke_end: Point

    @property
    def direction(self) -> float:
        """Undirected direction in [0, 180)."""
        return fold_180(direction_deg(self.p1, self.p2))

    @property
    def heading(self) -> float:
        """Directed heading p1→p2 in [0, 360)."""
        return direction_deg(self.p1, self.p2)

    @property
    def midpoint(self) -> Point:
        return midpoint(self.p1, self.p2)


def _pt(row: NDArray[np.float64]) -> Point:
    return (float(row[0]), float(row[1]))


def build_segments(strokes: list[NDArray[np.float64]]) -> list[Segment]:
    segments: list[Segment] = []
    for si, stroke in enumerate(strokes):
        if len(stroke) == 0:
            continue
        start, end = _pt(stroke[0]), _pt(stroke[-1])
        for i in range(len(stroke) - 1):
            p1, p2 = _pt(stroke[i]), _pt(stroke[i + 1])
            segments.append(
                Segment(
                    p1=p1,
                    p2=p2,
                    stroke_index=si,
                    segment_index=i,
                    length=dist(p1, p2),
                    stroke_start=start,
                    stroke_end=end,
                )
            )
    return segments
