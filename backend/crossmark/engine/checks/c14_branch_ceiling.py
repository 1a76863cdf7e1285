"""C14 — Branch ceiling.

One branch over the limit is ambiguous. With one or two strokes it is a
natural loop where the pen changed direction; with three or more strokes
balanced arms mean a cross plus an emphasis mark and imbalanced arms mean a
star. Two or more over the limit is never a simple cross.
"""

from __future__ import annotations

import logging

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check

logger = logging.getLogger(__name__)


@check(
    id="C14",
    stage=Stage.SHAPE,
    dependencies=["C13"],
    description="Reject too many ink directions, allowing natural loops and emphasis",
)
def branch_ceiling(ctx: ValidationContext) -> None:
    cfg = ctx.config
    branches = ctx.branch_count
    best = ctx.best_candidate
    if branches is None or best is None or branches <= cfg.max_branches:
        return

    if branches > cfg.max_branches + 1:
        ctx.conclude(Category.WRONG_SYMBOL, "different kind of mark", branch_count=branches)
        return

    if ctx.stroke_count <= 2:
        logger.debug("Natural loop allowed: %d branches, %d strokes", branches, ctx.stroke_count)
        return

    balance = best.arm_balance
    if balance < cfg.min_arm_balance_ratio:
        ctx.conclude(
            Category.WRONG_SYMBOL,
            "different kind of mark",
            branch_count=branches,
            stroke_count=ctx.stroke_count,
            arm_balance_ratio=round(balance, 3),
        )
