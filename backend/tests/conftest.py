"""Shared test fixtures.

Strokes are in logical canvas pixels; the default vote box spans
x 90..410, y 85..305 with its center at (250, 195).
"""

from __future__ import annotations

import math

import pytest


def line(p, q):
    """A two-point raw stroke; resampling fills in the rest."""
    return [p, q]


# Scenario A: clean X, arms ~113px
X_STROKES = [
    line((170, 115), (330, 275)),
    line((330, 115), (170, 275)),
]

# Single stroke: down-right diagonal, up the right edge, down-left diagonal
LOOPED_X_STROKES = [
    [(170, 115), (330, 275), (330, 115), (170, 275)],
]

# Scenario B: closed loop, no straight crossing
CIRCLE_STROKES = [
    [
        (250 + 50 * math.cos(math.radians(a * 10)), 195 + 50 * math.sin(math.radians(a * 10)))
        for a in range(37)
    ],
]

# Scenario C: three lines at 0, 60 and 120 degrees through the center
STAR_STROKES = [
    line((170, 195), (330, 195)),
    line((210, 125.72), (290, 264.28)),
    line((290, 125.72), (210, 264.28)),
]

# Scenario D: two small X's 160px apart, arms ~42px
TWO_CROSSES_STROKES = [
    line((140, 165), (200, 225)),
    line((200, 165), (140, 225)),
    line((300, 165), (360, 225)),
    line((360, 165), (300, 225)),
]

# Second crossing 57px down the first diagonal: inside scale, beyond retrace
INTENTIONAL_STROKES = [
    line((170, 115), (330, 275)),
    line((330, 115), (170, 275)),
    line((350, 175), (230, 295)),
]

# Scenario E
DAB_STROKES = [line((250, 195), (260, 195))]

# Scenario F: apex of the V pokes above the box top
OUTSIDE_V_STROKES = [
    [(170, 150), (250, 70), (330, 150)],
    line((250, 100), (250, 250)),
]

# X plus a long underline that crosses nothing
X_WITH_UNDERLINE_STROKES = X_STROKES + [line((120, 290), (400, 290))]

# T junction: the upper arm is only 10px
T_STROKES = [
    line((170, 195), (330, 195)),
    line((250, 185), (250, 300)),
]

# Crossing at 20 degrees: two directions merge into one branch
SHALLOW_CROSS_STROKES = [
    line((170, 195), (330, 195)),
    line((174.82, 167.64), (325.18, 222.36)),
]


@pytest.fixture
def x_strokes():
    return X_STROKES


@pytest.fixture
def looped_x_strokes():
    return LOOPED_X_STROKES


@pytest.fixture
def star_strokes():
    return STAR_STROKES
