"""Merge engine: resolves one directional input against the grid.

Tiles move at most one cell per input. Cells nearest the target wall are
visited first, so a train of tiles advances together and no tile ever steps
over a neighbour that has not been resolved yet.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Set

from tilemerge.components.grid import Coord, Grid
from tilemerge.components.tile import Tile


class Direction(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(slots=True)
class TileMove:
    tile_id: int
    source: Coord
    target: Coord
    score: int


@dataclass(slots=True)
class TileMerge:
    coord: Coord
    survivor: int
    removed: int
    score: int


@dataclass(slots=True)
class SpawnRequest:
    """New tile to place at ``coord``; it slides in from the off-grid ``entry`` cell."""
    coord: Coord
    score: int
    entry: Coord


@dataclass
class MoveOutcome:
    direction: Direction
    moves: List[TileMove] = field(default_factory=list)
    merges: List[TileMerge] = field(default_factory=list)
    moved: Set[Coord] = field(default_factory=set)
    scores_seen: List[int] = field(default_factory=list)
    score_events: List[int] = field(default_factory=list)
    bumps: List[Coord] = field(default_factory=list)
    spawn: Optional[SpawnRequest] = None
    game_over: bool = False

    @property
    def score_delta(self) -> int:
        return sum(self.score_events)

    @property
    def is_noop(self) -> bool:
        return not self.moved


def step(coord: Coord, direction: Direction, size: int) -> Coord:
    """One cell towards ``direction``, saturating at the grid edge."""
    x, y = coord
    nx = min(max(x + direction.dx, 0), size - 1)
    ny = min(max(y + direction.dy, 0), size - 1)
    return (nx, ny)


def sweep_order(direction: Direction, size: int) -> List[Coord]:
    """Every cell, lines orthogonal to the motion outermost, target wall first."""
    forward = list(range(size))
    backward = forward[::-1]
    if direction is Direction.LEFT:
        return [(x, y) for y in forward for x in forward]
    if direction is Direction.RIGHT:
        return [(x, y) for y in forward for x in backward]
    if direction is Direction.DOWN:
        return [(x, y) for x in forward for y in forward]
    return [(x, y) for x in forward for y in backward]


def spawn_edge(direction: Direction, size: int) -> List[Coord]:
    """Cells on the edge the motion pulls away from."""
    last = size - 1
    if direction is Direction.UP:
        return [(x, 0) for x in range(size)]
    if direction is Direction.DOWN:
        return [(x, last) for x in range(size)]
    if direction is Direction.LEFT:
        return [(last, y) for y in range(size)]
    return [(0, y) for y in range(size)]


def spawn_candidates(grid: Grid, direction: Direction) -> List[Coord]:
    return [coord for coord in spawn_edge(direction, grid.size) if not grid.is_filled(coord)]


def spawn_entry(coord: Coord, direction: Direction) -> Coord:
    """Off-grid cell a spawn at ``coord`` slides in from."""
    x, y = coord
    return (x - direction.dx, y - direction.dy)


def choose_spawn_score(scores: Sequence[int], rng: random.Random) -> int:
    """Pick from the lowest third (at least one) of the distinct scores seen."""
    distinct = sorted(set(scores))
    if not distinct:
        raise ValueError("Cannot choose a spawn score without any scores")
    keep = max(1, len(distinct) // 3)
    return rng.choice(distinct[:keep])


def has_adjacent_pair(grid: Grid) -> bool:
    for coord, tile in grid.tiles():
        for neighbour in grid.neighbors(coord):
            if neighbour is not None and neighbour.score == tile.score:
                return True
    return False


def is_terminal(grid: Grid) -> bool:
    """True when the grid is full and no two adjacent tiles share a score."""
    if grid.empty_cells():
        return False
    return not has_adjacent_pair(grid)


def place_spawn(grid: Grid, spawn: SpawnRequest, tile: Tile) -> None:
    if grid.is_filled(spawn.coord):
        raise ValueError(f"Spawn cell {spawn.coord} is already occupied")
    grid.add(spawn.coord, tile)


def apply_move(grid: Grid, direction: Direction, *, rng: random.Random | None = None) -> MoveOutcome:
    """Resolve one input in place and describe what happened.

    Blocked tiles stay put and are not reported as moved. A tile produced by a
    merge this sweep never merges again. When nothing moved the outcome is a
    no-op: no bumps, no spawn, no game-over evaluation.
    """
    if not isinstance(rng, random.Random):
        rng = random.Random()
    outcome = MoveOutcome(direction=direction)
    merged_ids: Set[int] = set()
    for coord in sweep_order(direction, grid.size):
        tile = grid.get(coord)
        if tile is None:
            continue
        outcome.scores_seen.append(tile.score)
        target = step(coord, direction, grid.size)
        if target == coord:
            continue
        occupant = grid.get(target)
        if occupant is not None:
            if occupant.score != tile.score or occupant.id in merged_ids:
                continue
            grid.take(coord)
            grid.take(target)
            tile.score += occupant.score
            grid.move(tile, target)
            merged_ids.add(tile.id)
            outcome.merges.append(TileMerge(coord=target, survivor=tile.id, removed=occupant.id, score=tile.score))
            outcome.score_events.append(tile.score)
        else:
            grid.take(coord)
            grid.move(tile, target)
        outcome.moves.append(TileMove(tile_id=tile.id, source=coord, target=target, score=tile.score))
        outcome.moved.add(target)

    if outcome.is_noop:
        return outcome

    outcome.bumps = sorted(outcome.moved)
    candidates = spawn_candidates(grid, direction)
    rng.shuffle(candidates)
    if candidates:
        coord = candidates[0]
        outcome.spawn = SpawnRequest(
            coord=coord,
            score=choose_spawn_score(outcome.scores_seen, rng),
            entry=spawn_entry(coord, direction),
        )
    else:
        outcome.game_over = is_terminal(grid)
    return outcome
