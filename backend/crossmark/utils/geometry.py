"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]

# Below this a length or determinant is treated as zero.
GEOMETRY_EPS = 1e-10


def dist(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def as_stroke(points) -> NDArray[np.float64]:
    """Coerce a sequence of (x, y) pairs into an Nx2 float array (always a copy)."""
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of a polyline."""
    if len(points) < 2:
        return 0.0
    return float(arc_lengths(points)[-1])


def point_in_rect(
    point: Point,
    rect: tuple[float, float, float, float],
    tolerance: float = 0.0,
) -> bool:
    """True if point lies inside (x, y, width, height), inflated by tolerance."""
    x, y, w, h = rect
    px, py = point
    return (
        x - tolerance <= px <= x + w + tolerance
        and y - tolerance <= py <= y + h + tolerance
    )


def midpoint(p1: Point, p2: Point) -> Point:
    return ((p1[0] + p2[0]) / 2, (p1[1] + p2[1]) / 2)


def point_to_line_distance(point: Point, line_point: Point, line_angle_deg: float) -> float:
    """Perpendicular distance from point to the infinite line through line_point."""
    rad = math.radians(line_angle_deg)
    dx = point[0] - line_point[0]
    dy = point[1] - line_point[1]
    return abs(dx * math.sin(rad) - dy * math.cos(rad))


def direction_deg(p1: Point, p2: Point) -> float:
    """Direction of p1→p2 in degrees, in [0, 360)."""
    return math.degrees(math.atan2(p2[1] - p1[1], p2[0] - p1[0])) % 360.0


def fold_180(angle_deg: float) -> float:
    """Fold a direction into [0, 180); lines are undirected."""
    folded = angle_deg % 180.0
    # -1e-17 % 180 rounds to 180.0
    return 0.0 if folded >= 180.0 else folded


def axis_difference(a_deg: float, b_deg: float) -> float:
    """Smallest difference between two undirected axes, in [0, 90]."""
    diff = abs(fold_180(a_deg) - fold_180(b_deg))
    return min(diff, 180.0 - diff)
