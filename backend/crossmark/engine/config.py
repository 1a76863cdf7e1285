"""Validator configuration — geometric calibration for cross-mark adjudication.

All distances are logical canvas pixels (canvas 500 x 400).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class VoteBox:
    """Rectangle the mark must stay inside."""

    x: float = 90.0
    y: float = 85.0
    width: float = 320.0
    height: float = 220.0

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable thresholds for one validator instance."""

    vote_box: VoteBox = field(default_factory=VoteBox)
    box_tolerance: float = 3.0

    # Preprocessing
    resample_step: float = 3.0
    simplify_epsilon: float = 3.0
    min_total_ink_length: float = 30.0  # dot filter
    max_points_total: int = 1200  # anti-scribble

    # Intersection detection
    endpoint_eps: float = 6.0
    min_crossing_angle_deg: float = 15.0

    # 4-arm extension
    min_arm_extension: float = 18.0
    arm_corridor_angle_tol_deg: float = 25.0
    arm_corridor_dist: float = 12.0

    # Global topology (star rejection)
    topology_analysis_radius: float = 60.0
    max_branches: int = 2  # X or + has exactly 2 angular directions
    branch_angle_cluster_tol_deg: float = 30.0

    # Multi-mark detection, ratios of the scale reference (typical arm length)
    cross_cluster_eps: float = 26.0
    retrace_tolerance_ratio: float = 0.12  # tremor / dry pen
    intentional_min_ratio: float = 0.20
    multi_mark_min_ratio: float = 1.0
    scale_reference_fallback: float = 60.0

    # Extra writing, by stroke count
    min_explained_ink_ratio: float = 0.70  # 3+ strokes
    min_explained_ink_ratio_single: float = 0.50  # loop at the turn point
    min_explained_ink_ratio_double: float = 0.62

    # Arm balance for branch_count == 3 with 3+ strokes
    min_arm_balance_ratio: float = 0.70

    def __post_init__(self) -> None:
        positive = {
            "resample_step": self.resample_step,
            "simplify_epsilon": self.simplify_epsilon,
            "cross_cluster_eps": self.cross_cluster_eps,
            "arm_corridor_dist": self.arm_corridor_dist,
            "topology_analysis_radius": self.topology_analysis_radius,
            "scale_reference_fallback": self.scale_reference_fallback,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.vote_box.width <= 0 or self.vote_box.height <= 0:
            raise ValueError("vote_box must have a positive width and height")
        if not self.retrace_tolerance_ratio <= self.intentional_min_ratio <= self.multi_mark_min_ratio:
            raise ValueError(
                "separation ratios must satisfy retrace <= intentional <= multi_mark"
            )

    def explained_ink_threshold(self, stroke_count: int) -> float:
        """Lenient for one stroke, moderate for two, strict for three or more."""
        if stroke_count == 1:
            return self.min_explained_ink_ratio_single
        if stroke_count == 2:
            return self.min_explained_ink_ratio_double
        return self.min_explained_ink_ratio

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
