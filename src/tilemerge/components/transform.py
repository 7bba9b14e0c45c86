from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float, float]

@dataclass(slots=True)
class Transform:
    """Pixel position of a drawable entity; written by MoveTo tweens."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_point(self) -> Point:
        return (self.x, self.y, self.z)

    def set_point(self, point: Point) -> None:
        self.x, self.y, self.z = point
