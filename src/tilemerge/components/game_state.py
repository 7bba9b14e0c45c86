"""Game state resource describing the session run state."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session run states; RUNNING -> GAME_OVER only, restart goes back."""
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current run state."""
    mode: GameMode = GameMode.RUNNING
    moves: int = 0
