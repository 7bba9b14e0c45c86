from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Scored game piece.

    id: stable identifier (the tile entity id); never changes across moves.
    score: power-of-two value; changes only when the tile absorbs a merge.
    """
    id: int
    score: int
