from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Tuple

from esper import World

from tilemerge.animation_factory import AnimationFactory
from tilemerge.components.background_cell import BackgroundCell
from tilemerge.components.dying import Dying
from tilemerge.components.game_over_banner import GameOverBanner
from tilemerge.components.game_state import GameMode
from tilemerge.components.scale import Scale
from tilemerge.components.score_state import ScoreAdd, ScoreReset
from tilemerge.components.tile import Tile
from tilemerge.components.transform import Transform
from tilemerge.constants import DYING_TILE_Z, START_TILES
from tilemerge.events.bus import (
    EVENT_DIRECTION_INPUT,
    EVENT_GAME_RESTARTED,
    EVENT_MOVE_RESOLVED,
    EVENT_RESTART_REQUESTED,
    EVENT_TICK,
    EVENT_TILE_DESPAWNED,
    EVENT_TILE_MERGED,
    EVENT_TILE_SPAWNED,
    EventBus,
)
from tilemerge.systems.grid_ops import Direction, MoveOutcome, SpawnRequest, apply_move, is_terminal, place_spawn
from tilemerge.systems.tween import KIND_SCALE
from tilemerge.ui.layout import compute_board_geometry
from tilemerge.utils.game_state import get_game_state, set_game_mode
from tilemerge.utils.resources import background_cells, get_banner_entity, get_grid, get_score_state

logger = logging.getLogger(__name__)

StartTiles = Iterable[Tuple[Tuple[int, int], int]]


class GameSessionSystem:
    """Runs one play session on top of the Grid, ScoreState and GameState resources.

    Directional input and restart requests are buffered and resolved on the
    next EVENT_TICK; only the first direction of a tick is kept. Each accepted
    move is turned into tween requests, queued score changes, an optional
    spawned tile and, when the board locks up, the switch to GAME_OVER.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        factory: AnimationFactory | None = None,
        start_tiles: StartTiles = START_TILES,
    ):
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self.rng = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
        self.geometry = getattr(world, "geometry", None) or compute_board_geometry(size=get_grid(world).size)
        self.factory = factory or AnimationFactory(event_bus, self.geometry)
        self.start_tiles = tuple(start_tiles)
        self._pending_direction: Optional[Direction] = None
        self._restart_requested = False
        self.event_bus.subscribe(EVENT_DIRECTION_INPUT, self.on_direction_input)
        self.event_bus.subscribe(EVENT_RESTART_REQUESTED, self.on_restart_requested)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        if not any(True for _ in get_grid(world).tiles()):
            self.seed_start_tiles()

    def on_direction_input(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if not isinstance(direction, Direction):
            return
        if self._pending_direction is None:
            self._pending_direction = direction

    def on_restart_requested(self, sender, **kwargs):
        self._restart_requested = True

    def on_tick(self, sender, **kwargs):
        direction, self._pending_direction = self._pending_direction, None
        if self._restart_requested:
            self._restart_requested = False
            self.restart()
            return
        if direction is not None:
            self.apply_direction(direction)

    def apply_direction(self, direction: Direction) -> MoveOutcome | None:
        """Resolve one input; returns None when it is ignored or moves nothing."""
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.RUNNING:
            return None
        grid = get_grid(self.world)
        outcome = apply_move(grid, direction, rng=self.rng)
        if outcome.is_noop:
            logger.debug("Move %s blocked; nothing to do", direction.name)
            return None
        state.moves += 1
        self._animate(outcome)
        score = get_score_state(self.world)
        for merged_score in outcome.score_events:
            score.queue(ScoreAdd(merged_score))
        spawned = None
        if outcome.spawn is not None:
            spawned = self._spawn(outcome.spawn)
        logger.debug(
            "Move %s: %d moved, %d merged, +%d, spawn=%s",
            direction.name, len(outcome.moves), len(outcome.merges), outcome.score_delta, outcome.spawn,
        )
        self.event_bus.emit(EVENT_MOVE_RESOLVED, direction=direction, outcome=outcome)
        if outcome.game_over or (spawned is not None and is_terminal(grid)):
            self._enter_game_over()
        return outcome

    def seed_start_tiles(self) -> list[int]:
        grid = get_grid(self.world)
        created = []
        for coord, score in self.start_tiles:
            entity = self._create_tile(score, self.geometry.cell_center(coord))
            grid.add(coord, self.world.component_for_entity(entity, Tile))
            self.event_bus.emit(EVENT_TILE_SPAWNED, entity=entity, coord=coord, score=score)
            created.append(entity)
        return created

    def restart(self) -> None:
        grid = get_grid(self.world)
        for entity, _ in list(self.world.get_component(Tile)):
            self.world.delete_entity(entity, immediate=True)
            self.event_bus.emit(EVENT_TILE_DESPAWNED, entity=entity)
        grid.clear()
        get_score_state(self.world).queue(ScoreReset())
        banner_entity = get_banner_entity(self.world)
        if banner_entity is not None:
            self.factory.cancel(banner_entity, KIND_SCALE)
            self.world.component_for_entity(banner_entity, GameOverBanner).visible = False
            self.world.component_for_entity(banner_entity, Scale).value = 1.0
        state = get_game_state(self.world)
        if state is not None:
            state.moves = 0
        set_game_mode(self.world, self.event_bus, GameMode.RUNNING)
        self.seed_start_tiles()
        logger.info("Session restarted")
        self.event_bus.emit(EVENT_GAME_RESTARTED)

    def _animate(self, outcome: MoveOutcome) -> None:
        for move in outcome.moves:
            self.factory.move_tile(move.tile_id, move.target)
        for merge in outcome.merges:
            self.world.add_component(merge.removed, Dying(merged_into=merge.survivor))
            try:
                self.world.component_for_entity(merge.removed, Transform).z = DYING_TILE_Z
            except KeyError:
                pass
            self.factory.kill_tile(merge.removed)
            self.event_bus.emit(
                EVENT_TILE_MERGED,
                survivor=merge.survivor,
                removed=merge.removed,
                coord=merge.coord,
                score=merge.score,
            )
        cells = background_cells(self.world)
        for coord in outcome.bumps:
            cell_entity = cells.get(coord)
            if cell_entity is None:
                continue
            cell = self.world.component_for_entity(cell_entity, BackgroundCell)
            self.factory.bump_cell(cell_entity, cell.base, outcome.direction)

    def _spawn(self, spawn: SpawnRequest) -> int:
        entity = self._create_tile(spawn.score, self.geometry.cell_center(spawn.entry))
        place_spawn(get_grid(self.world), spawn, self.world.component_for_entity(entity, Tile))
        self.factory.spawn_tile(entity, spawn.coord, spawn.entry)
        self.event_bus.emit(EVENT_TILE_SPAWNED, entity=entity, coord=spawn.coord, score=spawn.score)
        return entity

    def _create_tile(self, score: int, point) -> int:
        entity = self.world.create_entity()
        self.world.add_component(entity, Tile(id=entity, score=score))
        self.world.add_component(entity, Transform(*point))
        self.world.add_component(entity, Scale(1.0))
        return entity

    def _enter_game_over(self) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        banner_entity = get_banner_entity(self.world)
        if banner_entity is not None:
            self.world.component_for_entity(banner_entity, GameOverBanner).visible = True
            self.factory.pulse_banner(banner_entity)
        state = get_game_state(self.world)
        logger.info("Game over after %d moves", state.moves if state else 0)
