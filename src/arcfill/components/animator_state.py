from dataclasses import dataclass

@dataclass(slots=True)
class AnimatorState:
    """Singleton gate for the frame loop.

    elapsed: time accumulated towards the next step.
    frames: steps run since the animator last started.
    """
    is_animating: bool = False
    elapsed: float = 0.0
    frames: int = 0
