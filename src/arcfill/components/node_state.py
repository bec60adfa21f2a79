from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from arcfill.utils.scale_math import update_value


@dataclass(slots=True, frozen=True)
class StepResult:
    """Outcome of one animation step: still pending, or completed at ``scale``."""

    completed: bool = False
    index: Optional[int] = None
    scale: Optional[float] = None

    @classmethod
    def pending(cls) -> "StepResult":
        return cls()

    @classmethod
    def done(cls, index: Optional[int], scale: float) -> "StepResult":
        return cls(completed=True, index=index, scale=scale)


@dataclass(slots=True)
class NodeState:
    """Animation progress of a single node.

    scale: current progress, 0 is empty and 1 is filled and rotated.
    direction: sign of the change in progress; 0 while idle.
    committed_scale: the scale the last completed transition settled on.
    """

    scale: float = 0.0
    direction: float = 0.0
    committed_scale: float = 0.0

    @property
    def is_idle(self) -> bool:
        return self.direction == 0

    def update(self) -> StepResult:
        if self.is_idle:
            return StepResult.pending()
        self.scale += update_value(self.scale, self.direction, 2, 1)
        if abs(self.scale - self.committed_scale) > 1:
            self.scale = self.committed_scale + self.direction
            self.direction = 0.0
            self.committed_scale = self.scale
            return StepResult.done(None, self.committed_scale)
        return StepResult.pending()

    def start_updating(self) -> bool:
        if not self.is_idle:
            return False
        self.direction = 1 - 2 * self.committed_scale
        return True
