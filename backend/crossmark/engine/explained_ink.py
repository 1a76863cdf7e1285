"""Explained-ink ratio — share of ink consistent with a clean two-line cross.

The complement is unexplained ink: loops, extra marks, emphasis decoration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from crossmark.engine.config import ValidatorConfig
from crossmark.engine.segments import Segment
from crossmark.utils.geometry import axis_difference, point_to_line_distance

if TYPE_CHECKING:
    from crossmark.engine.context import CrossCandidate


def _in_corridor(seg: Segment, candidate: "CrossCandidate", axis: float, config: ValidatorConfig) -> bool:
    return (
        axis_difference(seg.direction, axis) <= config.arm_corridor_angle_tol_deg
        and point_to_line_distance(seg.midpoint, candidate.point, axis) <= config.arm_corridor_dist
    )


def explained_ink_ratio(
    candidate: "CrossCandidate",
    segments: list[Segment],
    config: ValidatorConfig,
) -> float:
    """explained_length / total_length in [0, 1]; 0 when there is no ink."""
    axis_a = candidate.arm_angles[0] % 180.0
    axis_b = candidate.arm_angles[2] % 180.0

    total = 0.0
    explained = 0.0
    for seg in segments:
        total += seg.length
        if _in_corridor(seg, candidate, axis_a, config) or _in_corridor(seg, candidate, axis_b, config):
            explained += seg.length

    if total <= 0:
        return 0.0
    return min(1.0, explained / total)
