from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Tuple

from esper import World

from tilemerge.components.grid import Grid
from tilemerge.components.scale import Scale
from tilemerge.components.tile import Tile
from tilemerge.components.transform import Transform
from tilemerge.events.bus import EventBus
from tilemerge.systems.frame import run_frame
from tilemerge.systems.score import ScoreSystem
from tilemerge.systems.session import GameSessionSystem
from tilemerge.systems.tween import TweenSystem
from tilemerge.utils.resources import get_grid
from tilemerge.world import create_world


@dataclass
class Session:
    bus: EventBus
    world: World
    session: GameSessionSystem
    score: ScoreSystem
    tweens: TweenSystem

    @property
    def grid(self) -> Grid:
        return get_grid(self.world)


def build_session(
    *,
    seed: int = 0,
    start_tiles: Iterable[Tuple[Tuple[int, int], int]] = (),
) -> Session:
    """World plus the session, score and tween systems, seeded for repeatable spawns."""
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    session = GameSessionSystem(world, bus, start_tiles=start_tiles)
    score = ScoreSystem(world, bus)
    tweens = TweenSystem(world, bus)
    return Session(bus=bus, world=world, session=session, score=score, tweens=tweens)


def place_tile(world: World, coord: Tuple[int, int], score: int) -> int:
    """Create a tile entity resting on ``coord`` and register it in the grid."""
    geometry = getattr(world, "geometry")
    entity = world.create_entity()
    tile = Tile(id=entity, score=score)
    world.add_component(entity, tile)
    world.add_component(entity, Transform(*geometry.cell_center(coord)))
    world.add_component(entity, Scale(1.0))
    get_grid(world).add(coord, tile)
    return entity


def drive_frames(bus: EventBus, count: int = 60, dt: float = 0.02) -> None:
    for _ in range(count):
        run_frame(bus, dt)
