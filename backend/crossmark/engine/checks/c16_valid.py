"""C16 — Valid. Every earlier check passed."""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C16",
    stage=Stage.CONTENT,
    dependencies=["C15"],
    description="Accept the mark",
)
def valid(ctx: ValidationContext) -> None:
    best = ctx.best_candidate
    ctx.conclude(
        Category.VALID,
        intersections=len(ctx.intersections),
        cross_candidates=len(ctx.candidates),
        min_extension=round(best.min_extension, 2) if best else None,
        branch_count=ctx.branch_count,
        explained_ratio=round(ctx.explained_ratio, 3) if ctx.explained_ratio is not None else None,
    )
