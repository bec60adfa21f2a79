import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import numpy as np
import matplotlib.pyplot as plt

from arcfill.components.node_state import NodeState
from arcfill.constants import FRAME_DELAY, SC_DIV


def progress_curve(state: NodeState) -> np.ndarray:
    """Scale after every frame of one transition, starting from the committed value."""
    scales = [state.scale]
    state.start_updating()
    while not state.update().completed:
        scales.append(state.scale)
    scales.append(state.scale)
    return np.array(scales)


forward = progress_curve(NodeState())
backward = progress_curve(NodeState(scale=1.0, committed_scale=1.0))

plt.figure(figsize=(7, 4))
plt.step(np.arange(len(forward)) * FRAME_DELAY, forward, where="post", label="Fill (0 to 1)")
plt.step(np.arange(len(backward)) * FRAME_DELAY, backward, where="post", label="Empty (1 to 0)")
plt.axhline(SC_DIV, color="gray", linestyle="--", label=f"Phase boundary ({SC_DIV})")
plt.axhline(0.5, color="gray", linestyle=":", label="Arcs full / rotation starts")
plt.xlabel("Seconds")
plt.ylabel("Node scale")
plt.title("Per-node progress: half-speed first phase, full-speed second phase")
plt.legend()
plt.grid(True)
plt.show()
