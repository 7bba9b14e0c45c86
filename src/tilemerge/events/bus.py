from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# FRAME PHASES (emitted in this order by systems.frame.run_frame)
# ============================================================================
EVENT_TICK = "tick"                    # payload: dt=float   input handling + merge
EVENT_SCORE_DRAIN = "score_drain"      # payload: dt=float   queued score changes
EVENT_ANIMATE = "animate"              # payload: dt=float   tween advancement


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_DIRECTION_INPUT = "direction_input"          # payload: direction=Direction
EVENT_RESTART_REQUESTED = "restart_requested"      # payload: None


# ============================================================================
# GRID & MERGE
# ============================================================================
EVENT_MOVE_RESOLVED = "move_resolved"      # payload: direction=Direction, outcome=MoveOutcome
EVENT_TILE_SPAWNED = "tile_spawned"        # payload: entity=int, coord=(x,y), score=int
EVENT_TILE_MERGED = "tile_merged"          # payload: survivor=int, removed=int, coord=(x,y), score=int
EVENT_TILE_DESPAWNED = "tile_despawned"    # payload: entity=int


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, entity=int, tween=MoveTo|ScaleTo|NumberChase
EVENT_ANIMATION_CANCEL = "animation_cancel"        # payload: entity=int, kind=str|None
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, entity=int


# ============================================================================
# SCORE & GAME STATE
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"          # payload: previous=int, total=int, reset=bool
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_RESTARTED = "game_restarted"        # payload: None
