from dataclasses import dataclass

@dataclass(slots=True)
class GameOverBanner:
    visible: bool = False
    text: str = "Game Over"
