from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from arcfill.config import ViewConfig
from arcfill.utils.scale_math import divide_scale

# (start_deg, sweep_deg), clockwise from the positive x axis in y-down screen space.
ArcSlice = Tuple[float, float]


@dataclass(slots=True)
class NodeGeometry:
    """Everything needed to draw one node, in y-down screen space."""

    index: int
    center_x: float
    center_y: float
    radius: float
    stroke_width: float
    rotation_deg: float
    arcs: List[ArcSlice] = field(default_factory=list)


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped layout shared by the node renderer."""

    window_width: int
    window_height: int
    gap: float
    radius: float
    stroke_width: float


def build_render_context(window_width: int, window_height: int, config: ViewConfig) -> RenderContext:
    gap = window_width / (config.nodes + 1)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        gap=gap,
        radius=gap / config.size_factor,
        stroke_width=min(window_width, window_height) / config.stroke_divisor,
    )


def compute_node_geometry(index: int, scale: float, ctx: RenderContext, config: ViewConfig) -> NodeGeometry:
    """Lay out node ``index`` at ``scale``.

    The first half of the scale grows the arcs, each arc over its own half of
    that range; the second half rotates the node by up to ``rot_deg``.
    """
    fill = divide_scale(scale, 0, 2)
    turn = divide_scale(scale, 1, 2)
    arcs: List[ArcSlice] = []
    for j in range(config.arcs):
        sc = divide_scale(fill, j, config.arcs)
        arcs.append((config.sweep_deg * j + config.offset_deg, config.offset_deg * sc))
    return NodeGeometry(
        index=index,
        center_x=ctx.gap * (index + 1),
        center_y=ctx.window_height / 2,
        radius=ctx.radius,
        stroke_width=ctx.stroke_width,
        rotation_deg=config.rot_deg * turn,
        arcs=arcs,
    )
