"""Escape-time evaluation for single points of the complex plane."""

from __future__ import annotations

import math

HORIZON = 4.0
SMOOTH_HORIZON = float(2 << 16)


def escape_time(x: float, y: float, max_iterations: int, continuous: bool = False) -> float:
    """Return the escape iteration of ``c = x + iy`` or ``0`` if it never escapes.

    Discrete mode returns the integer step at which ``|z|**2`` first reaches
    :data:`HORIZON`. Continuous mode uses the much larger
    :data:`SMOOTH_HORIZON` and returns the smoothed count
    ``n + 1 - log2(log2(|z|**2) / 2)``.
    """

    bailout = SMOOTH_HORIZON if continuous else HORIZON
    a, b = x, y
    for iters in range(1, max_iterations + 1):
        a2 = a * a
        b2 = b * b
        if a2 + b2 >= bailout:
            if continuous:
                nu = math.log2(math.log2(a2 + b2) * 0.5)
                return float(iters + 1) - nu
            return iters
        ab = a * b
        a = a2 - b2 + x
        b = ab + ab + y
    return 0
