"""C01 — Waiting.

No strokes at all is the neutral state, not an invalid ballot.
"""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C01",
    stage=Stage.INK,
    description="Neutral result while nothing has been drawn",
)
def waiting(ctx: ValidationContext) -> None:
    if ctx.stroke_count == 0:
        ctx.conclude(Category.WAITING)
