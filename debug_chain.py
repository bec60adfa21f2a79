import sys, os
ROOT = os.path.dirname(__file__); SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path: sys.path.insert(0, SRC)
from arcfill.events.bus import (EventBus, EVENT_TICK, EVENT_NODE_ANIMATION_COMPLETE,
                                EVENT_CHAIN_DIRECTION_FLIPPED)
from arcfill.world import create_world
from arcfill.systems.chain import ChainSystem
from arcfill.systems.animation import AnimationSystem
from arcfill.systems.input import InputSystem

bus = EventBus(); world = create_world()
chain = ChainSystem(world, bus)
animator = AnimationSystem(world, bus, chain)
taps = InputSystem(bus, chain, animator)
bus.subscribe(EVENT_NODE_ANIMATION_COMPLETE, lambda s, **k: print('complete', k))
bus.subscribe(EVENT_CHAIN_DIRECTION_FLIPPED, lambda s, **k: print('flip', k))

for tap in range(12):
    taps.tap()
    ticks = 0
    while animator.is_animating:
        bus.emit(EVENT_TICK, dt=0.025); ticks += 1
    print('tap', tap, 'ticks', ticks, 'scales', [s.scale for s in chain.node_states()],
          'next', chain.current_index, 'dir', chain.direction)
