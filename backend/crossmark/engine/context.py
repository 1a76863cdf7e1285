"""ValidationContext — per-call state flowing through the decision checks.

Created fresh for every validation and discarded afterwards; checks read
earlier results from it and either record new derived state or conclude
with a verdict.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from crossmark.engine.arm_extension import ArmMeasurement
from crossmark.engine.clustering import IntersectionCluster
from crossmark.engine.config import ValidatorConfig
from crossmark.engine.intersection import Intersection
from crossmark.engine.segments import Segment
from crossmark.utils.geometry import Point


class Category(str, enum.Enum):
    WAITING = "waiting"
    BLANK = "blank"
    OUTSIDE_BOX = "outside_box"
    NO_CROSS = "no_cross"
    MULTI_MARK = "multi_mark"
    INTENTIONAL = "intentional"
    WRONG_SYMBOL = "wrong_symbol"
    EXTRA_WRITING = "extra_writing"
    VALID = "valid"

    @property
    def rank(self) -> int:
        """Precedence; MULTI_MARK and INTENTIONAL share a level."""
        return _RANKS[self]

    @property
    def valid(self) -> bool | None:
        if self is Category.WAITING:
            return None
        return self is Category.VALID


_RANKS = {
    Category.WAITING: 0,
    Category.BLANK: 1,
    Category.OUTSIDE_BOX: 2,
    Category.NO_CROSS: 3,
    Category.MULTI_MARK: 4,
    Category.INTENTIONAL: 4,
    Category.WRONG_SYMBOL: 5,
    Category.EXTRA_WRITING: 6,
    Category.VALID: 7,
}


@dataclass(frozen=True)
class CrossCandidate:
    """An intersection with four sufficiently long ink arms."""

    point: Point
    extensions: tuple[float, float, float, float]
    arm_angles: tuple[float, float, float, float]
    # Distinct strokes across the containing cluster
    strokes_at_intersection: int

    @property
    def min_extension(self) -> float:
        return min(self.extensions)

    @property
    def arm_balance(self) -> float:
        """Weakest arm / strongest arm."""
        strongest = max(self.extensions)
        return self.min_extension / strongest if strongest > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "point": [round(self.point[0], 2), round(self.point[1], 2)],
            "min_extension": round(self.min_extension, 2),
            "extensions": [round(e, 2) for e in self.extensions],
            "arm_angles": [round(a, 2) for a in self.arm_angles],
            "strokes_at_intersection": self.strokes_at_intersection,
        }


@dataclass(frozen=True)
class Verdict:
    category: Category
    reason: str
    details: dict[str, Any] = field(default_factory=dict)
    check_id: str = ""


@dataclass
class ValidationContext:
    """Derived state for a single validation call."""

    strokes: list[NDArray[np.float64]]
    config: ValidatorConfig = field(default_factory=ValidatorConfig)

    # --- Preprocessing ---
    processed: list[NDArray[np.float64]] = field(default_factory=list)
    total_ink_length: float = 0.0
    total_points: int = 0

    # --- Geometry ---
    segments: list[Segment] = field(default_factory=list)
    intersections: list[Intersection] = field(default_factory=list)
    # measurements[i] belongs to intersections[i]
    measurements: list[ArmMeasurement] = field(default_factory=list)

    # --- Clustering ---
    clusters: list[IntersectionCluster] = field(default_factory=list)
    # intersection index -> cluster index
    cluster_of: dict[int, int] = field(default_factory=dict)
    scale_reference: float = 0.0
    separation: dict[str, Any] = field(default_factory=dict)

    # --- Decision ---
    candidates: list[CrossCandidate] = field(default_factory=list)
    best_candidate: CrossCandidate | None = None
    branch_count: int | None = None
    explained_ratio: float | None = None

    verdict: Verdict | None = None
    completed_checks: list[str] = field(default_factory=list)

    @property
    def stroke_count(self) -> int:
        return len(self.strokes)

    @property
    def valid_clusters(self) -> list[IntersectionCluster]:
        return [c for c in self.clusters if c.is_cross_valid]

    @property
    def concluded(self) -> bool:
        return self.verdict is not None

    def conclude(self, category: Category, reason: str = "", **details: Any) -> None:
        self.verdict = Verdict(category=category, reason=reason, details=details)


@dataclass(frozen=True)
class DebugInfo:
    """Intermediate artifacts for diagnostic tooling. No effect on the decision."""

    intersections: list[dict[str, Any]]
    clusters: list[dict[str, Any]]
    best_candidate: dict[str, Any] | None
    candidate_count: int
    branch_count: int | None
    explained_ratio: float | None
    scale_reference: float
    checks_run: list[str]

    @classmethod
    def from_context(cls, ctx: ValidationContext) -> "DebugInfo":
        return cls(
            intersections=[
                {
                    "x": round(inter.x, 2),
                    "y": round(inter.y, 2),
                    "angle": round(inter.angle, 2),
                    "strokes": sorted(inter.stroke_indices),
                }
                for inter in ctx.intersections
            ],
            clusters=[
                {
                    "centroid": [round(c.centroid[0], 2), round(c.centroid[1], 2)],
                    "count": c.count,
                    "indices": list(c.indices),
                    "strokes_at_cluster": c.strokes_at_cluster,
                    "is_cross_valid": c.is_cross_valid,
                }
                for c in ctx.clusters
            ],
            best_candidate=ctx.best_candidate.to_dict() if ctx.best_candidate else None,
            candidate_count=len(ctx.candidates),
            branch_count=ctx.branch_count,
            explained_ratio=ctx.explained_ratio,
            scale_reference=ctx.scale_reference,
            checks_run=list(ctx.completed_checks),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "intersections": self.intersections,
            "clusters": self.clusters,
            "best_candidate": self.best_candidate,
            "candidate_count": self.candidate_count,
            "branch_count": self.branch_count,
            "explained_ratio": self.explained_ratio,
            "scale_reference": self.scale_reference,
            "checks_run": self.checks_run,
        }


@dataclass(frozen=True)
class ValidationResult:
    category: Category
    reason: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    debug: DebugInfo | None = None

    @property
    def valid(self) -> bool | None:
        return self.category.valid

    @property
    def invalid_type(self) -> str | None:
        if self.valid is False:
            return self.category.value
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "category": self.category.value,
            "invalid_type": self.invalid_type,
            "reason": self.reason,
            "details": self.details,
            "debug": self.debug.to_dict() if self.debug else None,
        }
