from dataclasses import dataclass
from typing import Tuple

from tilemerge.constants import (
    BOARD_MARGIN,
    GRID_SIZE,
    SCORE_BAR_HEIGHT,
    TILE_SIZE,
    TILE_SPACING,
    TILE_Z,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

Point = Tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    size: int
    tile_size: float
    spacing: float
    left: float
    bottom: float

    @property
    def pitch(self) -> float:
        return self.tile_size + self.spacing

    @property
    def extent(self) -> float:
        return self.size * self.tile_size + (self.size - 1) * self.spacing

    def cell_center(self, coord: Tuple[int, int], z: float = TILE_Z) -> Point:
        """Pixel centre of ``coord``; off-grid coordinates extrapolate the lattice."""
        x, y = coord
        half = self.tile_size / 2
        return (
            self.left + half + x * self.pitch,
            self.bottom + half + y * self.pitch,
            z,
        )


def compute_board_geometry(
    window_width: int = WINDOW_WIDTH,
    window_height: int = WINDOW_HEIGHT,
    size: int = GRID_SIZE,
) -> BoardGeometry:
    """Fit the board under the score bar, centred horizontally.

    Tiles shrink below TILE_SIZE when the window is too small; never below 20px.
    """
    max_w = window_width - 2 * BOARD_MARGIN
    max_h = window_height - 2 * BOARD_MARGIN - SCORE_BAR_HEIGHT
    spacing = TILE_SPACING
    tile_size = min(TILE_SIZE, (min(max_w, max_h) - spacing * (size - 1)) / size)
    if tile_size < 20:
        tile_size = 20
    extent = size * tile_size + (size - 1) * spacing
    left = (window_width - extent) / 2
    bottom = BOARD_MARGIN
    return BoardGeometry(size=size, tile_size=tile_size, spacing=spacing, left=left, bottom=bottom)
