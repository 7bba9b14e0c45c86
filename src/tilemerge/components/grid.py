from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from tilemerge.components.tile import Tile
from tilemerge.constants import GRID_SIZE

Coord = Tuple[int, int]


class GridBoundsError(IndexError):
    """Raised when a mutating grid operation receives a coordinate outside the grid."""


@dataclass(slots=True)
class Grid:
    """Square occupancy table of optional tiles indexed by ``x + size * y``.

    Reads (get, is_filled, neighbors) are total and return empty results for
    coordinates off the grid. Writes (add, take, move) raise GridBoundsError.
    """
    size: int = GRID_SIZE
    slots: List[Optional[Tile]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if not self.slots:
            self.slots = [None] * (self.size * self.size)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.size and 0 <= y < self.size

    def index(self, coord: Coord) -> int:
        if not self.in_bounds(coord):
            raise GridBoundsError(f"Coordinate {coord} outside {self.size}x{self.size} grid")
        x, y = coord
        return x + self.size * y

    def add(self, coord: Coord, tile: Tile) -> None:
        self.slots[self.index(coord)] = tile

    def get(self, coord: Coord) -> Optional[Tile]:
        if not self.in_bounds(coord):
            return None
        x, y = coord
        return self.slots[x + self.size * y]

    def take(self, coord: Coord) -> Optional[Tile]:
        idx = self.index(coord)
        tile = self.slots[idx]
        self.slots[idx] = None
        return tile

    def move(self, tile: Tile, coord: Coord) -> None:
        # The old slot is left as is; callers take() it first.
        self.slots[self.index(coord)] = tile

    def is_filled(self, coord: Coord) -> bool:
        return self.get(coord) is not None

    def neighbors(self, coord: Coord) -> Tuple[Optional[Tile], Optional[Tile], Optional[Tile], Optional[Tile]]:
        """Axis-adjacent tiles in the order right, left, down, up."""
        x, y = coord
        return (
            self.get((x + 1, y)),
            self.get((x - 1, y)),
            self.get((x, y - 1)),
            self.get((x, y + 1)),
        )

    def clear(self) -> None:
        self.slots = [None] * (self.size * self.size)

    def coords(self) -> Iterator[Coord]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def tiles(self) -> Iterator[Tuple[Coord, Tile]]:
        for coord in self.coords():
            tile = self.get(coord)
            if tile is not None:
                yield coord, tile

    def empty_cells(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.get(coord) is None]

    def find(self, tile_id: int) -> Optional[Coord]:
        for coord, tile in self.tiles():
            if tile.id == tile_id:
                return coord
        return None
