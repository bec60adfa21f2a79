"""Tunable view settings, defaulting to the values in ``arcfill.constants``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from arcfill.constants import (
    ARCS,
    BACK_COLOR,
    FORE_COLOR,
    FRAME_DELAY,
    MAX_DEG,
    MAX_STEPS_PER_TICK,
    NODES,
    OFFSET_DEG,
    ROT_DEG,
    SIZE_FACTOR,
    STROKE_DIVISOR,
)

Color = Tuple[int, int, int]


@dataclass(slots=True, frozen=True)
class ViewConfig:
    """Geometry, colors and cadence for one view.

    Tests build shorter chains or faster cadences through this instead of
    patching module constants.
    """

    nodes: int = NODES
    arcs: int = ARCS
    size_factor: float = SIZE_FACTOR
    stroke_divisor: float = STROKE_DIVISOR
    offset_deg: float = OFFSET_DEG
    max_deg: float = MAX_DEG
    rot_deg: float = ROT_DEG
    fore_color: Color = FORE_COLOR
    back_color: Color = BACK_COLOR
    frame_delay: float = FRAME_DELAY
    max_steps_per_tick: int = MAX_STEPS_PER_TICK

    def __post_init__(self) -> None:
        if self.nodes < 1:
            raise ValueError(f"nodes must be at least 1, got {self.nodes}")
        if self.arcs < 1:
            raise ValueError(f"arcs must be at least 1, got {self.arcs}")
        if self.frame_delay <= 0:
            raise ValueError(f"frame_delay must be positive, got {self.frame_delay}")
        if self.max_steps_per_tick < 1:
            raise ValueError(
                f"max_steps_per_tick must be at least 1, got {self.max_steps_per_tick}"
            )
        if self.size_factor <= 0 or self.stroke_divisor <= 0:
            raise ValueError("size_factor and stroke_divisor must be positive")

    @property
    def sweep_deg(self) -> float:
        return self.max_deg / self.arcs


DEFAULT_CONFIG = ViewConfig()
