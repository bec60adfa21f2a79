from esper import World

from arcfill.config import DEFAULT_CONFIG, ViewConfig
from arcfill.components.animator_state import AnimatorState
from arcfill.components.chain_cursor import ChainCursor
from arcfill.components.node_index import NodeIndex
from arcfill.components.node_state import NodeState


def create_world(config: ViewConfig = DEFAULT_CONFIG) -> World:
    """Build the fixed node row plus the chain cursor and animator singletons.

    Node entities are created in index order and never added or removed later;
    only their ``NodeState`` mutates.
    """
    world = World()
    setattr(world, "config", config)

    for i in range(config.nodes):
        world.create_entity(NodeIndex(index=i), NodeState())

    world.create_entity(ChainCursor(current=0, direction=1))
    world.create_entity(AnimatorState())
    return world
