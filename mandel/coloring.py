"""Mapping from escape-time values to RGB colors."""

from __future__ import annotations

import math
from typing import Sequence

Color = Sequence[int]
RGB = tuple[int, int, int]

INSIDE_COLOR: RGB = (0, 0, 0)


def map_color(
    iters: float,
    palette: Sequence[Color],
    continuous: bool = False,
    inside_color: Color = INSIDE_COLOR,
) -> RGB:
    """Return the RGB color for an escape-time value.

    ``0`` marks a point that never escaped and yields ``inside_color``.
    Discrete values cycle through ``palette`` by index ``iters % len``;
    continuous values blend two neighbouring palette entries by the
    fractional part of ``iters``.
    """

    if iters == 0:
        return int(inside_color[0]), int(inside_color[1]), int(inside_color[2])

    size = len(palette)
    if not continuous:
        color = palette[int(iters) % size]
        return int(color[0]), int(color[1]), int(color[2])

    floor = math.floor(iters)
    lo, hi = floor, floor + 1
    # the smoothing formula occasionally dips below one
    if lo < 1:
        lo, hi = 1, 2
    weight = iters - floor
    c1 = palette[(lo - 1) % size]
    c2 = palette[(hi - 1) % size]
    return (
        int(c1[0] * (1.0 - weight) + c2[0] * weight),
        int(c1[1] * (1.0 - weight) + c2[1] * weight),
        int(c1[2] * (1.0 - weight) + c2[2] * weight),
    )
