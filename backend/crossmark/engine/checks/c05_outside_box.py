"""C05 — Outside box.

Every simplified segment is densely resampled before the box test: a fast
stroke gives long segments whose endpoints are both inside while the
straight path between them leaves and re-enters the box.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from crossmark.engine.config import ValidatorConfig
from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check


def _dense_samples(stroke: NDArray[np.float64], step: float) -> NDArray[np.float64]:
    if len(stroke) < 2:
        return stroke
    chunks = []
    for p1, p2 in zip(stroke[:-1], stroke[1:]):
        d = float(np.hypot(*(p2 - p1)))
        steps = max(1, math.ceil(d / step))
        t = np.linspace(0.0, 1.0, steps + 1)[:, None]
        chunks.append(p1 + t * (p2 - p1))
    return np.vstack(chunks)


def first_point_outside(
    strokes: list[NDArray[np.float64]],
    config: ValidatorConfig,
) -> tuple[float, float] | None:
    box = config.vote_box
    tol = config.box_tolerance
    for stroke in strokes:
        samples = _dense_samples(stroke, config.resample_step)
        if len(samples) == 0:
            continue
        outside = (
            (samples[:, 0] < box.x - tol)
            | (samples[:, 0] > box.x + box.width + tol)
            | (samples[:, 1] < box.y - tol)
            | (samples[:, 1] > box.y + box.height + tol)
        )
        if outside.any():
            pt = samples[int(np.argmax(outside))]
            return (float(pt[0]), float(pt[1]))
    return None


@check(
    id="C05",
    stage=Stage.INK,
    dependencies=["C04"],
    description="Reject ink leaving the vote box",
)
def outside_box(ctx: ValidationContext) -> None:
    pt = first_point_outside(ctx.processed, ctx.config)
    if pt is not None:
        ctx.conclude(
            Category.OUTSIDE_BOX,
            "mark extends outside the box",
            outside_point=[round(pt[0], 2), round(pt[1], 2)],
        )
