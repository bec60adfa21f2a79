from dataclasses import dataclass

@dataclass(slots=True)
class ChainCursor:
    """Singleton component: which node animates next and which way the chain walks.

    current: index of the node the next tap starts.
    direction: +1 walking right, -1 walking left.
    """
    current: int = 0
    direction: int = 1
