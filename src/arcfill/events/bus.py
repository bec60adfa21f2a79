from blinker import Signal
from typing import Dict

class EventBus:
    """Named blinker signals shared by the window and the systems."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references: systems are often constructed without being stored.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float
EVENT_RESIZE = "resize"                      # payload: width=int, height=int


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button, modifiers


# ============================================================================
# ANIMATOR
# ============================================================================
EVENT_ANIMATOR_STARTED = "animator_started"  # payload: None
EVENT_ANIMATOR_STOPPED = "animator_stopped"  # payload: frames=int
EVENT_FRAME_STEPPED = "frame_stepped"        # payload: index=int, scale=float


# ============================================================================
# CHAIN & NODES
# ============================================================================
EVENT_NODE_ANIMATION_START = "node_animation_start"        # payload: index=int, direction=float
EVENT_NODE_ANIMATION_COMPLETE = "node_animation_complete"  # payload: index=int, scale=float
EVENT_CHAIN_DIRECTION_FLIPPED = "chain_direction_flipped"  # payload: index=int, direction=int
