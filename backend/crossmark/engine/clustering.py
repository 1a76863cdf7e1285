"""Cluster engine — spatial grouping of intersections and angular grouping of directions.

Spatial: DBSCAN with min_samples=1, i.e. single-linkage chaining. Every
intersection reachable through a chain of <= eps hops lands in one cluster,
so a cluster's diameter may exceed eps (thick or retraced ink).

Angular: sorted sweep merging consecutive directions into length-weighted
modes, then one merge across the 0/180 seam.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from sklearn.cluster import DBSCAN

from crossmark.engine.intersection import Intersection


@dataclass
class IntersectionCluster:
    points: list[Intersection]
    indices: list[int]
    centroid: tuple[float, float]
    is_cross_valid: bool = False

    @property
    def count(self) -> int:
        return len(self.points)

    @property
    def strokes_at_cluster(self) -> int:
        """Distinct strokes across every member, not just one crossing."""
        strokes: set[int] = set()
        for inter in self.points:
            strokes |= inter.stroke_indices
        return len(strokes)


@dataclass
class AngleMode:
    angle: float
    weight: float


def cluster_intersections(
    intersections: list[Intersection],
    epsilon: float,
) -> list[IntersectionCluster]:
    if not intersections:
        return []

    coords = np.array([inter.point for inter in intersections], dtype=np.float64)
    labels = DBSCAN(eps=epsilon, min_samples=1).fit(coords).labels_

    # Labels are assigned in order of each cluster's lowest member index
    clusters: list[IntersectionCluster] = []
    for cid in range(int(labels.max()) + 1):
        members = [i for i in range(len(intersections)) if labels[i] == cid]
        center = coords[members].mean(axis=0)
        clusters.append(
            IntersectionCluster(
                points=[intersections[m] for m in members],
                indices=members,
                centroid=(float(center[0]), float(center[1])),
            )
        )
    return clusters


def _merge(a_angle: float, a_weight: float, b_angle: float, b_weight: float) -> AngleMode:
    total = a_weight + b_weight
    if total <= 0:
        return AngleMode(angle=(a_angle + b_angle) / 2, weight=0.0)
    return AngleMode(angle=(a_angle * a_weight + b_angle * b_weight) / total, weight=total)


def cluster_angles(
    items: list[tuple[float, float]],
    tolerance: float,
) -> list[AngleMode]:
    """Cluster (angle, weight) pairs, angles in [0, 180). Modes by descending weight."""
    if not items:
        return []

    data = sorted(((a % 180.0, w) for a, w in items), key=lambda it: it[0])

    modes: list[AngleMode] = []
    current = AngleMode(angle=data[0][0], weight=data[0][1])
    for angle, weight in data[1:]:
        if abs(angle - current.angle) <= tolerance:
            current = _merge(current.angle, current.weight, angle, weight)
        else:
            modes.append(current)
            current = AngleMode(angle=angle, weight=weight)
    modes.append(current)

    # 0/180 seam: the last mode continues below zero
    if len(modes) > 1:
        first, last = modes[0], modes[-1]
        wrapped_last = last.angle - 180.0
        if abs(first.angle - wrapped_last) <= tolerance:
            merged = _merge(first.angle, first.weight, wrapped_last, last.weight)
            merged.angle %= 180.0
            modes = [merged] + modes[1:-1]

    return sorted(modes, key=lambda m: m.weight, reverse=True)
