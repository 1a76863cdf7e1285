"""Stroke preprocessing — uniform resampling followed by RDP simplification."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LineString

from crossmark.utils.geometry import arc_lengths

# Keep the raw last point if the last emitted sample is farther than this.
_TAIL_KEEP_DIST = 0.5


def resample_stroke(stroke: NDArray[np.float64], step: float) -> NDArray[np.float64]:
    """Resample a polyline to uniform spacing of ``step`` arc-length units."""
    if len(stroke) < 2:
        return stroke.copy()

    cumlen = arc_lengths(stroke)
    even_s = np.arange(0.0, cumlen[-1] + 1e-9, step)
    out = np.column_stack([
        np.interp(even_s, cumlen, stroke[:, 0]),
        np.interp(even_s, cumlen, stroke[:, 1]),
    ])

    last = stroke[-1]
    if math.hypot(out[-1][0] - last[0], out[-1][1] - last[1]) > _TAIL_KEEP_DIST:
        out = np.vstack([out, last])
    return out


def simplify_rdp(points: NDArray[np.float64], epsilon: float) -> NDArray[np.float64]:
    """Ramer-Douglas-Peucker simplification (topology not preserved)."""
    if len(points) < 3:
        return points.copy()
    simplified = LineString(points).simplify(epsilon, preserve_topology=False)
    return np.asarray(simplified.coords, dtype=np.float64)


def preprocess_stroke(
    stroke: NDArray[np.float64],
    step: float,
    epsilon: float,
) -> NDArray[np.float64]:
    return simplify_rdp(resample_stroke(stroke, step), epsilon)
