"""C04 — Scribble guard.

Simplification keeps a straight cross down to a handful of points; a point
total this high means dense scribbling.
"""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C04",
    stage=Stage.INK,
    dependencies=["C03"],
    description="Reject scribbles by simplified point count",
)
def scribble_guard(ctx: ValidationContext) -> None:
    if ctx.total_points > ctx.config.max_points_total:
        ctx.conclude(
            Category.WRONG_SYMBOL,
            "different kind of mark",
            total_points=ctx.total_points,
        )
