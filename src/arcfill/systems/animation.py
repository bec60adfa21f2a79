from __future__ import annotations

import logging

from esper import World

from arcfill.components.animator_state import AnimatorState
from arcfill.events.bus import (
    EventBus,
    EVENT_ANIMATOR_STARTED,
    EVENT_ANIMATOR_STOPPED,
    EVENT_FRAME_STEPPED,
    EVENT_TICK,
)
from arcfill.systems.chain import ChainSystem

log = logging.getLogger(__name__)


class AnimationSystem:
    """Fixed-cadence frame loop gated by ``AnimatorState.is_animating``.

    Time arrives through ``EVENT_TICK``; every ``frame_delay`` seconds of
    accumulated time one chain step runs. Nothing here blocks the draw path.
    """

    def __init__(self, world: World, event_bus: EventBus, chain: ChainSystem):
        self.world = world
        self.event_bus = event_bus
        self.chain = chain
        config = getattr(world, "config")
        self.frame_delay: float = config.frame_delay
        self.max_steps_per_tick: int = config.max_steps_per_tick
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _state(self) -> AnimatorState:
        for _, state in self.world.get_component(AnimatorState):
            return state
        raise KeyError("AnimatorState")

    @property
    def is_animating(self) -> bool:
        return self._state().is_animating

    def start(self) -> None:
        state = self._state()
        if state.is_animating:
            return
        state.is_animating = True
        state.elapsed = 0.0
        state.frames = 0
        log.debug("animator started")
        self.event_bus.emit(EVENT_ANIMATOR_STARTED)

    def stop(self) -> None:
        state = self._state()
        if not state.is_animating:
            return
        state.is_animating = False
        state.elapsed = 0.0
        log.debug("animator stopped after %d frames", state.frames)
        self.event_bus.emit(EVENT_ANIMATOR_STOPPED, frames=state.frames)

    def on_tick(self, sender, **kwargs):
        state = self._state()
        if not state.is_animating:
            return
        try:
            dt = float(kwargs.get('dt', 1/60))
        except (TypeError, ValueError):
            return
        if dt < 0:
            return
        state.elapsed += dt
        steps = 0
        while state.is_animating and state.elapsed >= self.frame_delay:
            if steps >= self.max_steps_per_tick:
                # Drop the backlog rather than replaying it in one frame.
                state.elapsed = 0.0
                break
            state.elapsed -= self.frame_delay
            steps += 1
            self.step()

    def step(self) -> None:
        """Run one chain update; stop the loop once the current node settles."""
        state = self._state()
        if not state.is_animating:
            return
        index = self.chain.current_index
        result = self.chain.update()
        state.frames += 1
        if result.completed:
            self.stop()
            return
        self.event_bus.emit(
            EVENT_FRAME_STEPPED,
            index=index,
            scale=self.chain.node_state(index).scale,
        )
