from dataclasses import dataclass

@dataclass(slots=True)
class ScoreDisplay:
    """Displayed score; chases ScoreState.total through a NumberChase tween."""
    value: float = 0.0
