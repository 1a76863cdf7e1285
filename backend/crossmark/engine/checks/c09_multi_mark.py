"""C09 — Multi-mark / intentional invalidation.

Separation between cross-valid cluster centroids, relative to the scale
reference:

    d <  intentional_min_ratio * scale   retracing, same mark
    d >= intentional_min_ratio * scale   intentional invalidation
    d >= multi_mark_min_ratio * scale    distinct marks

Every pair is measured; any multi-mark pair outranks intentional pairs.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial.distance import pdist

from crossmark.engine.context import Category, ValidationContext
from crossmark.engine.registry import Stage, check

logger = logging.getLogger(__name__)


def separation_thresholds(ctx: ValidationContext) -> tuple[float, float]:
    """(intentional, multi-mark) distances; below intentional is retracing."""
    scale = ctx.scale_reference
    return scale * ctx.config.intentional_min_ratio, scale * ctx.config.multi_mark_min_ratio


def classify_separation(ctx: ValidationContext) -> tuple[bool, bool, float]:
    """Return (has_multi_mark, has_intentional, largest separation)."""
    intentional_threshold, multi_threshold = separation_thresholds(ctx)

    centroids = np.array([c.centroid for c in ctx.valid_clusters], dtype=np.float64)
    if len(centroids) < 2:
        return False, False, 0.0

    separations = pdist(centroids)
    has_multi = bool(np.any(separations >= multi_threshold))
    has_intentional = bool(np.any(separations >= intentional_threshold))
    return has_multi, has_intentional, float(separations.max())


@check(
    id="C09",
    stage=Stage.MARK_COUNT,
    dependencies=["C08"],
    description="Reject multiple marks or intentional invalidation by cluster separation",
)
def multi_mark(ctx: ValidationContext) -> None:
    valid_count = len(ctx.valid_clusters)
    if valid_count < 2:
        return

    intentional_threshold, multi_threshold = separation_thresholds(ctx)
    has_multi, has_intentional, largest = classify_separation(ctx)
    ctx.separation = {
        "valid_clusters": valid_count,
        "scale_reference": round(ctx.scale_reference, 1),
        "largest_separation": round(largest, 1),
    }

    if has_multi:
        ctx.conclude(
            Category.MULTI_MARK,
            "more than one mark",
            threshold=round(multi_threshold, 1),
            **ctx.separation,
        )
    elif has_intentional:
        ctx.conclude(
            Category.INTENTIONAL,
            "additional mark made to invalidate the ballot",
            threshold=round(intentional_threshold, 1),
            **ctx.separation,
        )
    else:
        logger.debug("%d cross-valid clusters within retrace distance, treating as one mark", valid_count)
