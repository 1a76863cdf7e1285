"""C15 — Extra writing.

Threshold depends on stroke count: a single-stroke cross always leaves
unexplained loop ink at its turn point.
"""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.explained_ink import explained_ink_ratio
from crossmark.engine.registry import Stage, check


@check(
    id="C15",
    stage=Stage.CONTENT,
    dependencies=["C14"],
    description="Reject crosses with too much ink off the two cross axes",
)
def extra_writing(ctx: ValidationContext) -> None:
    if ctx.best_candidate is None:
        return
    threshold = ctx.config.explained_ink_threshold(ctx.stroke_count)
    ctx.explained_ratio = explained_ink_ratio(ctx.best_candidate, ctx.segments, ctx.config)

    if ctx.explained_ratio < threshold:
        ctx.conclude(
            Category.EXTRA_WRITING,
            "extra symbols or writing",
            explained_ratio=round(ctx.explained_ratio, 3),
            threshold=threshold,
            stroke_count=ctx.stroke_count,
        )
