from __future__ import annotations

from typing import Dict, Tuple

from esper import World

from tilemerge.components.background_cell import BackgroundCell
from tilemerge.components.game_over_banner import GameOverBanner
from tilemerge.components.grid import Grid
from tilemerge.components.score_display import ScoreDisplay
from tilemerge.components.score_state import ScoreState


def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Grid resource not found")


def get_score_state(world: World) -> ScoreState:
    for _, score in world.get_component(ScoreState):
        return score
    raise RuntimeError("ScoreState resource not found")


def get_score_display_entity(world: World) -> int | None:
    for entity, _ in world.get_component(ScoreDisplay):
        return entity
    return None


def get_banner_entity(world: World) -> int | None:
    for entity, _ in world.get_component(GameOverBanner):
        return entity
    return None


def background_cells(world: World) -> Dict[Tuple[int, int], int]:
    """Map of grid coordinate -> background cell entity."""
    return {cell.coord: entity for entity, cell in world.get_component(BackgroundCell)}
