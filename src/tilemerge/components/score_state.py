from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True, slots=True)
class ScoreAdd:
    delta: int


@dataclass(frozen=True, slots=True)
class ScoreReset:
    pass


ScoreChange = Union[ScoreAdd, ScoreReset]


@dataclass(slots=True)
class ScoreState:
    """Running score plus the queue of changes not yet applied.

    total: score after the last drain.
    previous: total before the last drain; kept for exactly one tick so the
        display can chase old -> new, ``None`` otherwise.
    pending: changes queued since the last drain, applied in order.
    """
    total: int = 0
    previous: Optional[int] = None
    pending: List[ScoreChange] = field(default_factory=list)

    def queue(self, change: ScoreChange) -> None:
        self.pending.append(change)

    def drain(self) -> bool:
        """Apply every pending change; returns True when a reset was among them."""
        self.previous = self.total
        reset = False
        changes, self.pending = self.pending, []
        for change in changes:
            if isinstance(change, ScoreReset):
                self.total = 0
                reset = True
            else:
                self.total += change.delta
        return reset
