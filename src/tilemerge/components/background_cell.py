from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class BackgroundCell:
    """Static backdrop square behind grid cell ``coord``.

    base: resting pixel position; bumps bounce away from and back to it.
    """
    coord: Tuple[int, int]
    base: Tuple[float, float, float]
