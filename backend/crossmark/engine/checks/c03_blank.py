"""C03 — Blank (dot filter)."""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


@check(
    id="C03",
    stage=Stage.INK,
    dependencies=["C02"],
    description="Reject marks with too little ink",
)
def blank(ctx: ValidationContext) -> None:
    if ctx.total_ink_length < ctx.config.min_total_ink_length:
        ctx.conclude(
            Category.BLANK,
            "no mark",
            total_ink_length=round(ctx.total_ink_length, 2),
        )
