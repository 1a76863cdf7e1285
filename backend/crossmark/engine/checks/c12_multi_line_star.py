"""C12 — Multi-line star.

Three or more strokes converging on one cluster are a star, whatever the
branch count says: angularly close lines can merge into two branches.
"""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C12",
    stage=Stage.SHAPE,
    dependencies=["C11"],
    description="Reject three or more strokes through one crossing",
)
def multi_line_star(ctx: ValidationContext) -> None:
    best = ctx.best_candidate
    if best is not None and best.strokes_at_intersection >= 3:
        ctx.conclude(
            Category.WRONG_SYMBOL,
            "different kind of mark",
            strokes_at_intersection=best.strokes_at_intersection,
            branch_count=ctx.branch_count,
        )
