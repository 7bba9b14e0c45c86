from __future__ import annotations

from typing import Any, List, Tuple, Union

from esper import World

from tilemerge.components.animation_chase import NumberChase
from tilemerge.components.animation_move import MoveTo
from tilemerge.components.animation_scale import ScaleTo
from tilemerge.components.dying import Dying
from tilemerge.components.scale import Scale
from tilemerge.components.score_display import ScoreDisplay
from tilemerge.components.transform import Transform
from tilemerge.events.bus import (
    EVENT_ANIMATE,
    EVENT_ANIMATION_CANCEL,
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_TILE_DESPAWNED,
    EventBus,
)
from tilemerge.systems.tween_ops import step_chase, step_move, step_scale

Tween = Union[MoveTo, ScaleTo, NumberChase]

KIND_MOVE = "move"
KIND_SCALE = "scale"
KIND_CHASE = "chase"

TWEEN_TYPES = {
    KIND_MOVE: MoveTo,
    KIND_SCALE: ScaleTo,
    KIND_CHASE: NumberChase,
}


class TweenSystem:
    """Drives every active tween once per frame.

    The active set is the set of entities carrying a MoveTo, ScaleTo or
    NumberChase component. Requests arriving through EVENT_ANIMATION_START are
    queued and attached only after the frame's advancement pass, so a tween
    requested during a tick is first advanced on the next one. A finished
    shrink on a Dying tile deletes the tile entity.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._queued: List[Tuple[int, Tween]] = []
        event_bus.subscribe(EVENT_ANIMATE, self.on_animate)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_ANIMATION_CANCEL, self.on_animation_cancel)
        event_bus.subscribe(EVENT_TILE_DESPAWNED, self.on_tile_despawned)

    def on_animation_start(self, sender, **kwargs):
        entity = kwargs.get('entity')
        tween = kwargs.get('tween')
        if entity is None or tween is None:
            return
        self._queued.append((entity, tween))

    def on_animation_cancel(self, sender, **kwargs):
        entity = kwargs.get('entity')
        if entity is None:
            return
        kind = kwargs.get('kind')
        types = [TWEEN_TYPES[kind]] if kind else list(TWEEN_TYPES.values())
        self._queued = [
            (ent, tween) for ent, tween in self._queued
            if not (ent == entity and isinstance(tween, tuple(types)))
        ]
        for comp_type in types:
            try:
                self.world.remove_component(entity, comp_type)
            except KeyError:
                pass

    def on_tile_despawned(self, sender, **kwargs):
        entity = kwargs.get('entity')
        self._queued = [(ent, tween) for ent, tween in self._queued if ent != entity]

    def on_animate(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self.advance(dt)
        self.attach_queued()

    def advance(self, dt: float) -> None:
        for ent, (move, transform) in list(self.world.get_components(MoveTo, Transform)):
            point, finished = step_move(move, dt)
            transform.set_point(point)
            if finished:
                self._finish(ent, MoveTo, KIND_MOVE)
        for ent, (scale_to, scale) in list(self.world.get_components(ScaleTo, Scale)):
            value, finished = step_scale(scale_to, dt)
            scale.value = value
            if finished:
                self._finish(ent, ScaleTo, KIND_SCALE)
        for ent, chase in list(self.world.get_component(NumberChase)):
            value, finished = step_chase(chase, dt)
            try:
                self.world.component_for_entity(ent, ScoreDisplay).value = value
            except KeyError:
                pass
            if finished:
                self._finish(ent, NumberChase, KIND_CHASE)

    def attach_queued(self) -> None:
        queued, self._queued = self._queued, []
        for ent, tween in queued:
            if not self.world.entity_exists(ent):
                continue
            if isinstance(tween, MoveTo) and tween.start is None:
                tween.start = self._ensure(ent, Transform).as_point()
            elif isinstance(tween, ScaleTo) and tween.start is None:
                tween.start = self._ensure(ent, Scale).value
            self.world.add_component(ent, tween)

    def active(self) -> List[Tuple[int, Any]]:
        """(entity, tween) pairs currently being advanced."""
        entries: List[Tuple[int, Any]] = []
        for comp_type in TWEEN_TYPES.values():
            entries.extend(self.world.get_component(comp_type))
        return entries

    def pending(self) -> List[Tuple[int, Tween]]:
        return list(self._queued)

    def _ensure(self, ent: int, comp_type):
        try:
            return self.world.component_for_entity(ent, comp_type)
        except KeyError:
            comp = comp_type()
            self.world.add_component(ent, comp)
            return comp

    def _finish(self, ent: int, comp_type, kind: str) -> None:
        self.world.remove_component(ent, comp_type)
        if kind == KIND_SCALE and self.world.has_component(ent, Dying):
            self.world.delete_entity(ent, immediate=True)
            self.event_bus.emit(EVENT_TILE_DESPAWNED, entity=ent)
        self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, entity=ent)
