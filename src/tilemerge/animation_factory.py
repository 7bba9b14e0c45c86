from typing import Tuple

from tilemerge.components.animation_chase import NumberChase
from tilemerge.components.animation_move import MoveTo, Point
from tilemerge.components.animation_scale import ScaleTo
from tilemerge.constants import (
    BUMP_DISTANCE,
    BUMP_DURATION,
    DEATH_DURATION,
    MOVE_DURATION,
    PULSE_DURATION,
    PULSE_SCALE,
    SCORE_CHASE_DURATION,
    SPAWN_DURATION,
)
from tilemerge.events.bus import EVENT_ANIMATION_CANCEL, EVENT_ANIMATION_START, EventBus
from tilemerge.systems.tween import KIND_CHASE, KIND_MOVE, KIND_SCALE
from tilemerge.ui.layout import BoardGeometry
from tilemerge.utils.easing import Easing


class AnimationFactory:
    """Builds the tweens used by the session and hands them to TweenSystem."""

    def __init__(self, event_bus: EventBus, geometry: BoardGeometry):
        self.event_bus = event_bus
        self.geometry = geometry

    def move_tile(self, entity: int, coord: Tuple[int, int]) -> MoveTo:
        tween = MoveTo(end=self.geometry.cell_center(coord), duration=MOVE_DURATION, easing=Easing.EASE_OUT_BACK)
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_MOVE, entity=entity, tween=tween)
        return tween

    def spawn_tile(self, entity: int, coord: Tuple[int, int], entry: Tuple[int, int]) -> MoveTo:
        tween = MoveTo(
            start=self.geometry.cell_center(entry),
            end=self.geometry.cell_center(coord),
            duration=SPAWN_DURATION,
            easing=Easing.EASE_OUT_BOUNCE,
        )
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_MOVE, entity=entity, tween=tween)
        return tween

    def kill_tile(self, entity: int) -> ScaleTo:
        tween = ScaleTo(end=0.0, duration=DEATH_DURATION, easing=Easing.EASE_IN_CIRC)
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_SCALE, entity=entity, tween=tween)
        return tween

    def bump_cell(self, entity: int, base: Point, direction) -> MoveTo:
        x, y, z = base
        tween = MoveTo(
            start=base,
            end=(x + direction.dx * BUMP_DISTANCE, y + direction.dy * BUMP_DISTANCE, z),
            duration=BUMP_DURATION,
            easing=Easing.EASE_IN_OUT_CIRC,
            loop_count=1,
            bounce=True,
        )
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_MOVE, entity=entity, tween=tween)
        return tween

    def pulse_banner(self, entity: int) -> ScaleTo:
        tween = ScaleTo(
            start=1.0,
            end=PULSE_SCALE,
            duration=PULSE_DURATION,
            easing=Easing.EASE_IN_OUT_CIRC,
            looping=True,
        )
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_SCALE, entity=entity, tween=tween)
        return tween

    def chase_score(self, entity: int, start: float, end: float) -> NumberChase:
        # Wait for the move animation so the number climbs as tiles land.
        tween = NumberChase(start=start, end=end, duration=SCORE_CHASE_DURATION, delay=MOVE_DURATION)
        self.event_bus.emit(EVENT_ANIMATION_START, kind=KIND_CHASE, entity=entity, tween=tween)
        return tween

    def cancel(self, entity: int, kind: str | None = None) -> None:
        self.event_bus.emit(EVENT_ANIMATION_CANCEL, entity=entity, kind=kind)
