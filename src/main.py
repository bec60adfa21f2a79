"""Entry point for the double arc fill rotation view.

Sets up the world, event bus, systems and the Arcade window.
"""
from __future__ import annotations

from arcade import Window, run, set_background_color
from arcfill.config import DEFAULT_CONFIG, ViewConfig
from arcfill.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from arcfill.events.bus import EVENT_MOUSE_PRESS, EVENT_RESIZE, EVENT_TICK, EventBus
from arcfill.logging_setup import configure_logging
from arcfill.systems.animation import AnimationSystem
from arcfill.systems.chain import ChainSystem
from arcfill.systems.input import InputSystem
from arcfill.systems.render import RenderSystem
from arcfill.world import create_world


class ArcFillWindow(Window):
    def __init__(self, config: ViewConfig = DEFAULT_CONFIG, *, fullscreen: bool = True):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(config)

        self.chain_system = ChainSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus, self.chain_system)
        self.input_system = InputSystem(self.event_bus, self.chain_system, self.animation_system)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.chain_system)

        set_background_color(config.back_color)
        if fullscreen:
            try:
                self.set_fullscreen(True)
            except Exception:
                # Headless or windowed-only platforms refuse fullscreen; keep the window.
                pass

    @classmethod
    def create(cls, config: ViewConfig = DEFAULT_CONFIG) -> "ArcFillWindow":
        return cls(config)

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_RESIZE, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )


def main():
    configure_logging()
    ArcFillWindow.create()
    run()

if __name__ == "__main__":
    main()
