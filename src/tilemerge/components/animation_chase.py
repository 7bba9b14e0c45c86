from dataclasses import dataclass

from tilemerge.utils.easing import Easing

@dataclass(slots=True)
class NumberChase:
    """Numeric display tween; ``current`` holds the value to show this tick.

    Interpolation starts once ``elapsed`` reaches ``delay``; until then
    ``current`` stays at ``start``.
    """
    start: float
    end: float
    duration: float
    delay: float = 0.0
    easing: Easing = Easing.EASE_IN_OUT_CIRC
    elapsed: float = 0.0
    current: float = 0.0

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"NumberChase duration must be positive, got {self.duration}")
        if self.delay < 0:
            raise ValueError(f"NumberChase delay must not be negative, got {self.delay}")
        self.current = self.start
