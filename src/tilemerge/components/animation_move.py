from dataclasses import dataclass
from typing import Optional, Tuple

from tilemerge.utils.easing import Easing

Point = Tuple[float, float, float]

@dataclass(slots=True)
class MoveTo:
    """Position tween writing the owning entity's Transform.

    start: None means "from wherever the entity is" and is filled in when the
        tween is attached.
    loop_count: remaining wraps before the tween clamps and is removed.
    bounce: swap start/end at every wrap.
    """
    end: Point
    duration: float
    start: Optional[Point] = None
    easing: Easing = Easing.EASE_OUT_BACK
    elapsed: float = 0.0
    loop_count: int = 0
    bounce: bool = False

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"MoveTo duration must be positive, got {self.duration}")
