"""C07 — Cluster analysis.

Each intersection's four arms are measured once here and reused by the
scale reference and the candidate list. A cluster is cross-valid if any
member has four valid arms.

strokes_at_cluster is the union over members: a 3-stroke star gives three
pairwise crossings that each show only two strokes.
"""

from __future__ import annotations

from crossmark.engine.arm_extension import measure_four_arms
from crossmark.engine.clustering import cluster_intersections
from crossmark.engine.context import ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C07",
    stage=Stage.GEOMETRY,
    dependencies=["C06"],
    description="Cluster intersections and measure four-arm extension per crossing",
)
def cluster_analysis(ctx: ValidationContext) -> None:
    cfg = ctx.config
    ctx.measurements = [
        measure_four_arms(inter.point, inter.seg1, inter.seg2, ctx.processed, cfg)
        for inter in ctx.intersections
    ]
    ctx.clusters = cluster_intersections(ctx.intersections, cfg.cross_cluster_eps)

    for ci, cluster in enumerate(ctx.clusters):
        for idx in cluster.indices:
            ctx.cluster_of[idx] = ci
        cluster.is_cross_valid = any(ctx.measurements[idx].valid for idx in cluster.indices)
