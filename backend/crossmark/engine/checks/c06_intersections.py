"""C06 — Intersections / no cross."""

from __future__ import annotations

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.intersection import find_all_intersections
from crossmark.engine.registry import Stage, check
from crossmark.engine.segments import build_segments


@check(
    id="C06",
    stage=Stage.GEOMETRY,
    dependencies=["C05"],
    description="Build segments, find crossings, reject marks without any",
)
def intersections(ctx: ValidationContext) -> None:
    ctx.segments = build_segments(ctx.processed)
    ctx.intersections = find_all_intersections(ctx.segments, ctx.config)
    if not ctx.intersections:
        ctx.conclude(Category.NO_CROSS, "no cross-shaped intersection", intersections=0)
