import logging

from arcfill.events.bus import EventBus, EVENT_MOUSE_PRESS
from arcfill.systems.animation import AnimationSystem
from arcfill.systems.chain import ChainSystem

log = logging.getLogger(__name__)


class InputSystem:
    """Turns any press on the view into a tap on the chain."""

    def __init__(self, event_bus: EventBus, chain: ChainSystem, animator: AnimationSystem):
        self.event_bus = event_bus
        self.chain = chain
        self.animator = animator
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        # Position and button are not used: a press anywhere advances the row.
        self.tap()

    def tap(self) -> bool:
        if not self.chain.current_is_idle():
            log.debug("tap ignored, node %d still animating", self.chain.current_index)
            return False
        if not self.chain.start_updating():
            return False
        self.animator.start()
        return True
