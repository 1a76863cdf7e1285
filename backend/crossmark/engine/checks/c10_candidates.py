"""C10 — Cross candidates.

Best candidate is the largest weakest-arm; the first one wins ties. The
strongest, most symmetric crossing dominates secondary loops and emphasis.
"""

from __future__ import annotations

from crossmark.engine.context import Category, CrossCandidate, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C10",
    stage=Stage.SHAPE,
    dependencies=["C09"],
    description="Collect crossings with four valid arms and pick the strongest",
)
def candidates(ctx: ValidationContext) -> None:
    for idx, (inter, measurement) in enumerate(zip(ctx.intersections, ctx.measurements)):
        if not measurement.valid:
            continue
        cluster = ctx.clusters[ctx.cluster_of[idx]]
        ctx.candidates.append(
            CrossCandidate(
                point=inter.point,
                extensions=measurement.extensions,
                arm_angles=measurement.arm_angles,
                strokes_at_intersection=cluster.strokes_at_cluster,
            )
        )

    if not ctx.candidates:
        ctx.conclude(Category.WRONG_SYMBOL, "different kind of mark", cross_candidates=0)
        return

    best = ctx.candidates[0]
    for cand in ctx.candidates[1:]:
        if cand.min_extension > best.min_extension:
            best = cand
    ctx.best_candidate = best
