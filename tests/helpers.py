from __future__ import annotations

from dataclasses import dataclass

from esper import World

from arcfill.config import DEFAULT_CONFIG, ViewConfig
from arcfill.events.bus import EVENT_TICK, EventBus
from arcfill.systems.animation import AnimationSystem
from arcfill.systems.chain import ChainSystem
from arcfill.systems.input import InputSystem
from arcfill.world import create_world


@dataclass
class View:
    bus: EventBus
    world: World
    chain: ChainSystem
    animator: AnimationSystem
    input: InputSystem


def build_view(config: ViewConfig = DEFAULT_CONFIG) -> View:
    """Wire the headless systems the way the window does."""

    bus = EventBus()
    world = create_world(config)
    chain = ChainSystem(world, bus)
    animator = AnimationSystem(world, bus, chain)
    input_system = InputSystem(bus, chain, animator)
    return View(bus=bus, world=world, chain=chain, animator=animator, input=input_system)


def drive(bus: EventBus, ticks: int, dt: float = 0.025) -> None:
    for _ in range(ticks):
        bus.emit(EVENT_TICK, dt=dt)


def run_until_idle(view: View, max_ticks: int = 200, dt: float = 0.025) -> int:
    """Tick until the animator stops; return the number of ticks used."""

    for tick in range(1, max_ticks + 1):
        view.bus.emit(EVENT_TICK, dt=dt)
        if not view.animator.is_animating:
            return tick
    raise AssertionError(f"animator still running after {max_ticks} ticks")
