from dataclasses import dataclass

@dataclass(slots=True)
class NodeIndex:
    """Position of a node entity in the row, 0 at the left."""
    index: int
