"""Per-tween stepping shared by TweenSystem and tests.

Each ``step_*`` advances one tween by ``dt`` and returns the value to write
this tick plus whether the tween has finished and must leave the active set.
Completion happens once ``elapsed`` reaches ``duration``.
"""
from __future__ import annotations

from typing import Tuple

from tilemerge.components.animation_chase import NumberChase
from tilemerge.components.animation_move import MoveTo, Point
from tilemerge.components.animation_scale import ScaleTo
from tilemerge.utils.easing import ease


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def lerp_point(start: Point, end: Point, t: float) -> Point:
    return (
        lerp(start[0], end[0], t),
        lerp(start[1], end[1], t),
        lerp(start[2], end[2], t),
    )


def step_move(move: MoveTo, dt: float) -> Tuple[Point, bool]:
    if move.start is None:
        raise ValueError("MoveTo stepped before its start point was resolved")
    move.elapsed += dt
    done = min(move.elapsed / move.duration, 1.0)
    value = lerp_point(move.start, move.end, ease(move.easing, done))
    if move.elapsed >= move.duration:
        if move.loop_count <= 0:
            return move.end, True
        move.loop_count -= 1
        move.elapsed %= move.duration
        if move.bounce:
            move.start, move.end = move.end, move.start
    return value, False


def step_scale(scale: ScaleTo, dt: float) -> Tuple[float, bool]:
    if scale.start is None:
        raise ValueError("ScaleTo stepped before its start scale was resolved")
    scale.elapsed += dt
    done = min(scale.elapsed / scale.duration, 1.0)
    value = lerp(scale.start, scale.end, ease(scale.easing, done))
    if scale.elapsed >= scale.duration:
        if not scale.looping:
            return scale.end, True
        scale.elapsed %= scale.duration
    return value, False


def step_chase(chase: NumberChase, dt: float) -> Tuple[float, bool]:
    chase.elapsed += dt
    running = chase.elapsed - chase.delay
    if running < 0:
        chase.current = chase.start
        return chase.current, False
    if running >= chase.duration:
        chase.current = chase.end
        return chase.current, True
    done = min(running / chase.duration, 1.0)
    chase.current = lerp(chase.start, chase.end, ease(chase.easing, done))
    return chase.current, False
