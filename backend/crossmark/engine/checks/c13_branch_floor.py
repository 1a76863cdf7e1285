"""C13 — Branch floor. Parallel or single-direction ink has no cross shape."""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C13",
    stage=Stage.SHAPE,
    dependencies=["C12"],
    description="Reject fewer than two ink directions",
)
def branch_floor(ctx: ValidationContext) -> None:
    if ctx.branch_count is not None and ctx.branch_count < 2:
        ctx.conclude(Category.WRONG_SYMBOL, "no cross shape", branch_count=ctx.branch_count)
