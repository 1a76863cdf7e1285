"""C11 — Global branch count around the best candidate."""

from __future__ import annotations

from crossmark.engine.context import ValidationContext
from crossmark.engine.registry import Stage, check
from crossmark.engine.topology import count_global_branches


@check(
    id="C11",
    stage=Stage.SHAPE,
    dependencies=["C10"],
    description="Count distinct ink directions near the best crossing",
)
def branch_count(ctx: ValidationContext) -> None:
    if ctx.best_candidate is None:
        return
    ctx.branch_count = count_global_branches(ctx.best_candidate.point, ctx.processed, ctx.config)
