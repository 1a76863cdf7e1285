"""C08 — Scale reference.

Median of the four-arm average over every valid crossing in a cross-valid
cluster. Makes separation thresholds proportional to drawing size.
"""

from __future__ import annotations

import numpy as np

from crossmark.engine.context import ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C08",
    stage=Stage.MARK_COUNT,
    dependencies=["C07"],
    description="Estimate typical arm length (median) for scale-adaptive thresholds",
)
def scale_reference(ctx: ValidationContext) -> None:
    arm_lengths = [
        ctx.measurements[idx].mean_extension
        for cluster in ctx.valid_clusters
        for idx in cluster.indices
        if ctx.measurements[idx].valid
    ]
    if arm_lengths:
        ctx.scale_reference = float(np.median(arm_lengths))
    else:
        ctx.scale_reference = ctx.config.scale_reference_fallback
