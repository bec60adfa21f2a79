"""Pure helpers mapping a node's progress into per-segment scales and step sizes."""
from __future__ import annotations

import math

from arcfill.constants import SC_DIV, SC_GAP


def inverse(n: int) -> float:
    return 1.0 / n


def max_scale(scale: float, i: int, n: int) -> float:
    return max(0.0, scale - i * inverse(n))


def divide_scale(scale: float, i: int, n: int) -> float:
    """Return the progress of segment ``i`` of ``n`` equal segments, in [0, 1].

    Segment ``i`` covers ``[i/n, (i+1)/n]`` of the global scale.
    """
    return min(inverse(n), max_scale(scale, i, n)) * n


def scale_factor(scale: float) -> int:
    """Bucket a scale into its half-cycle phase, 0 below ``SC_DIV`` and 1 above.

    Overshoots outside [0, 1] are clamped so the step never vanishes.
    """
    return min(1, max(0, math.floor(scale / SC_DIV)))


def mirror_value(scale: float, a: int, b: int) -> float:
    phase = scale_factor(scale)
    return (1 - phase) * inverse(a) + phase * inverse(b)


def update_value(scale: float, direction: float, a: int, b: int) -> float:
    """Per-frame increment: ``1/a`` of a step in the first phase, ``1/b`` in the second."""
    return mirror_value(scale, a, b) * direction * SC_GAP
