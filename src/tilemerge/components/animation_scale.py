from dataclasses import dataclass
from typing import Optional

from tilemerge.utils.easing import Easing

@dataclass(slots=True)
class ScaleTo:
    """Scale tween writing the owning entity's Scale; ``looping`` never completes."""
    end: float
    duration: float
    start: Optional[float] = None
    easing: Easing = Easing.EASE_OUT_BACK
    elapsed: float = 0.0
    looping: bool = False

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"ScaleTo duration must be positive, got {self.duration}")
