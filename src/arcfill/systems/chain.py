from __future__ import annotations

import logging
from typing import Callable, Dict, List

from esper import World

from arcfill.components.chain_cursor import ChainCursor
from arcfill.components.node_index import NodeIndex
from arcfill.components.node_state import NodeState, StepResult
from arcfill.events.bus import (
    EventBus,
    EVENT_CHAIN_DIRECTION_FLIPPED,
    EVENT_NODE_ANIMATION_COMPLETE,
    EVENT_NODE_ANIMATION_START,
)

log = logging.getLogger(__name__)


class ChainSystem:
    """Walks the node row back and forth, animating one node at a time.

    Nodes are addressed by index; neighbours are the bounds-checked
    ``index + direction`` lookups, so there are no node-to-node references.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._states: Dict[int, NodeState] = {}
        self._rebuild_index()

    def _rebuild_index(self) -> None:
        self._states.clear()
        for ent, node in self.world.get_component(NodeIndex):
            self._states[node.index] = self.world.component_for_entity(ent, NodeState)
        expected = list(range(len(self._states)))
        if sorted(self._states) != expected:
            raise ValueError(f"node indices must be contiguous from 0, got {sorted(self._states)}")

    def _cursor(self) -> ChainCursor:
        for _, cursor in self.world.get_component(ChainCursor):
            return cursor
        raise KeyError("ChainCursor")

    @property
    def node_count(self) -> int:
        return len(self._states)

    @property
    def current_index(self) -> int:
        return self._cursor().current

    @property
    def direction(self) -> int:
        return self._cursor().direction

    def node_state(self, index: int) -> NodeState:
        return self._states[index]

    def node_states(self) -> List[NodeState]:
        return [self._states[i] for i in range(self.node_count)]

    def current_is_idle(self) -> bool:
        return self.node_state(self.current_index).is_idle

    def get_next(self, index: int, direction: int, on_boundary: Callable[[], None]) -> int:
        """Neighbour of ``index`` in ``direction``; at either end call ``on_boundary`` and stay put."""
        candidate = index + direction
        if 0 <= candidate < self.node_count:
            return candidate
        on_boundary()
        return index

    def update_node(self, index: int) -> StepResult:
        result = self.node_state(index).update()
        if result.completed:
            return StepResult.done(index, result.scale)
        return result

    def start_node(self, index: int) -> bool:
        return self.node_state(index).start_updating()

    def update(self) -> StepResult:
        """Step the current node; on completion advance the cursor and report."""
        cursor = self._cursor()
        result = self.update_node(cursor.current)
        if not result.completed:
            return result

        def flip() -> None:
            cursor.direction *= -1
            log.debug("chain direction flipped to %d at node %d", cursor.direction, cursor.current)
            self.event_bus.emit(
                EVENT_CHAIN_DIRECTION_FLIPPED,
                index=cursor.current,
                direction=cursor.direction,
            )

        cursor.current = self.get_next(cursor.current, cursor.direction, flip)
        log.debug("node %d settled at %.0f, next node %d", result.index, result.scale, cursor.current)
        self.event_bus.emit(EVENT_NODE_ANIMATION_COMPLETE, index=result.index, scale=result.scale)
        return result

    def start_updating(self) -> bool:
        cursor = self._cursor()
        started = self.start_node(cursor.current)
        if started:
            state = self.node_state(cursor.current)
            log.debug("node %d started, direction %+.0f", cursor.current, state.direction)
            self.event_bus.emit(
                EVENT_NODE_ANIMATION_START,
                index=cursor.current,
                direction=state.direction,
            )
        return started
