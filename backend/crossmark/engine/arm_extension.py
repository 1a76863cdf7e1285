"""4-arm extension — how far ink reaches in four directions from a crossing point.

Arms are ordered (dir1, dir1 + 180, dir2, dir2 + 180) in both
``extensions`` and ``arm_angles``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from crossmark.engine.config import ValidatorConfig
from crossmark.engine.segments import Segment
from crossmark.utils.geometry import (
    GEOMETRY_EPS,
    Point,
    axis_difference,
    direction_deg,
    midpoint,
    point_to_line_distance,
)


@dataclass(frozen=True)
class ArmMeasurement:
    valid: bool
    extensions: tuple[float, float, float, float]
    arm_angles: tuple[float, float, float, float]

    @property
    def min_extension(self) -> float:
        return min(self.extensions)

    @property
    def max_extension(self) -> float:
        return max(self.extensions)

    @property
    def mean_extension(self) -> float:
        return sum(self.extensions) / 4


def find_ink_in_corridor(
    point: Point,
    direction: float,
    strokes: list[NDArray[np.float64]],
    config: ValidatorConfig,
) -> float:
    """Farthest forward ink reach from ``point`` along ``direction`` (degrees)."""
    rad = math.radians(direction)
    vx, vy = math.cos(rad), math.sin(rad)
    px, py = point
    max_dist = 0.0

    for stroke in strokes:
        for i in range(len(stroke) - 1):
            p1 = (float(stroke[i][0]), float(stroke[i][1]))
            p2 = (float(stroke[i + 1][0]), float(stroke[i + 1][1]))
            if math.hypot(p2[0] - p1[0], p2[1] - p1[1]) < GEOMETRY_EPS:
                continue

            if axis_difference(direction_deg(p1, p2), direction) > config.arm_corridor_angle_tol_deg:
                continue

            if point_to_line_distance(midpoint(p1, p2), point, direction) > config.arm_corridor_dist:
                continue

            # Segments passing through P count only on their forward side
            for ex, ey in (p1, p2):
                dx, dy = ex - px, ey - py
                if dx * vx + dy * vy >= 0:
                    max_dist = max(max_dist, math.hypot(dx, dy))

    return max_dist


def measure_four_arms(
    point: Point,
    seg1: Segment,
    seg2: Segment,
    strokes: list[NDArray[np.float64]],
    config: ValidatorConfig,
) -> ArmMeasurement:
    angle1 = seg1.direction
    angle2 = seg2.direction
    arm_angles = (angle1, (angle1 + 180.0) % 360.0, angle2, (angle2 + 180.0) % 360.0)

    extensions = tuple(find_ink_in_corridor(point, a, strokes, config) for a in arm_angles)
    return ArmMeasurement(
        valid=min(extensions) >= config.min_arm_extension,
        extensions=extensions,  # type: ignore[arg-type]
        arm_angles=arm_angles,
    )
