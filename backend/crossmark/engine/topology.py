"""Global topology — count distinct ink directions around a point.

A proper X or + has exactly two; stars and scribbles have more.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from crossmark.engine.clustering import AngleMode, cluster_angles
from crossmark.engine.config import ValidatorConfig
from crossmark.utils.geometry import GEOMETRY_EPS, Point, direction_deg, dist, fold_180, midpoint


def branch_modes(
    point: Point,
    strokes: list[NDArray[np.float64]],
    config: ValidatorConfig,
) -> list[AngleMode]:
    """Angular modes of segments whose midpoint lies within the analysis radius."""
    nearby: list[tuple[float, float]] = []
    for stroke in strokes:
        for i in range(len(stroke) - 1):
            p1 = (float(stroke[i][0]), float(stroke[i][1]))
            p2 = (float(stroke[i + 1][0]), float(stroke[i + 1][1]))
            length = math.hypot(p2[0] - p1[0], p2[1] - p1[1])
            if length < GEOMETRY_EPS:
                continue
            if dist(midpoint(p1, p2), point) <= config.topology_analysis_radius:
                nearby.append((fold_180(direction_deg(p1, p2)), length))

    return cluster_angles(nearby, config.branch_angle_cluster_tol_deg)


def count_global_branches(
    point: Point,
    strokes: list[NDArray[np.float64]],
    config: ValidatorConfig,
) -> int:
    return len(branch_modes(point, strokes, config))
