"""C02 — Preprocess.

Raw ink length is measured before resampling; point totals after RDP.
"""

from __future__ import annotations

from crossmark.engine.context import ValidationContext
from crossmark.engine.preprocessing import preprocess_stroke
from crossmark.engine.registry import Stage, check
from crossmark.utils.geometry import polyline_length


@check(
    id="C02",
    stage=Stage.INK,
    dependencies=["C01"],
    description="Resample and simplify every stroke",
)
def preprocess(ctx: ValidationContext) -> None:
    cfg = ctx.config
    ctx.total_ink_length = sum(polyline_length(s) for s in ctx.strokes)
    ctx.processed = [
        preprocess_stroke(s, cfg.resample_step, cfg.simplify_epsilon) for s in ctx.strokes
    ]
    ctx.total_points = sum(len(s) for s in ctx.processed)
