from __future__ import annotations

from esper import World

from arcfill.events.bus import EventBus, EVENT_RESIZE
from arcfill.rendering.context import NodeGeometry, RenderContext, build_render_context, compute_node_geometry
from arcfill.rendering.node_renderer import NodeRenderer
from arcfill.systems.chain import ChainSystem


class RenderSystem:
    """Draws the whole row every frame, whichever node is animating.

    The window clears to the background color before ``process`` runs.
    """

    def __init__(self, world: World, event_bus: EventBus, window, chain: ChainSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.chain = chain
        self.config = getattr(world, "config")
        self._node_renderer = NodeRenderer(self.config)
        self._last_window_size = (window.width, window.height)
        self._ctx: RenderContext = build_render_context(window.width, window.height, self.config)
        self.last_geometry: list[NodeGeometry] = []
        event_bus.subscribe(EVENT_RESIZE, self.on_resize)

    def on_resize(self, sender, **kwargs):
        width = kwargs.get('width', self.window.width)
        height = kwargs.get('height', self.window.height)
        self.notify_resize(width, height)

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._ctx = build_render_context(width, height, self.config)

    def layout(self) -> list[NodeGeometry]:
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)
        return [
            compute_node_geometry(i, state.scale, self._ctx, self.config)
            for i, state in enumerate(self.chain.node_states())
        ]

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self.last_geometry = self.layout()
        if headless:
            return
        ctx = self._ctx
        for geometry in self.last_geometry:
            self._node_renderer.render(arcade, ctx, geometry)
