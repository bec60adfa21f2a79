from __future__ import annotations

from arcfill.config import ViewConfig
from arcfill.rendering.context import NodeGeometry, RenderContext


def to_arcade_angles(start_deg: float, sweep_deg: float, rotation_deg: float) -> tuple[float, float]:
    """Convert a clockwise, y-down slice into arcade's counter-clockwise start/end pair.

    Rotation is folded in here instead of passed as tilt so the slice is turned
    about the node center rather than about its own bounding box.
    """
    start = start_deg + rotation_deg
    return -(start + sweep_deg), -start


class NodeRenderer:
    """Draw one node: the outline circle plus its filled pie slices."""

    def __init__(self, config: ViewConfig):
        self.config = config

    def render(self, arcade, ctx: RenderContext, geometry: NodeGeometry) -> None:
        color = self.config.fore_color
        # Arcade's y axis grows upwards.
        cx = geometry.center_x
        cy = ctx.window_height - geometry.center_y
        arcade.draw_circle_outline(cx, cy, geometry.radius, color, geometry.stroke_width)
        diameter = geometry.radius * 2
        for start_deg, sweep_deg in geometry.arcs:
            if sweep_deg <= 0:
                continue
            start, end = to_arcade_angles(start_deg, sweep_deg, geometry.rotation_deg)
            arcade.draw_arc_filled(cx, cy, diameter, diameter, color, start, end)
