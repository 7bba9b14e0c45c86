import random

from esper import World

from tilemerge.components.background_cell import BackgroundCell
from tilemerge.components.game_over_banner import GameOverBanner
from tilemerge.components.game_state import GameMode, GameState
from tilemerge.components.grid import Grid
from tilemerge.components.scale import Scale
from tilemerge.components.score_display import ScoreDisplay
from tilemerge.components.score_state import ScoreState
from tilemerge.components.transform import Transform
from tilemerge.constants import GRID_SIZE, SCORE_BAR_HEIGHT
from tilemerge.events.bus import EventBus
from tilemerge.ui.layout import BoardGeometry, compute_board_geometry


def create_world(
    event_bus: EventBus,
    *,
    size: int = GRID_SIZE,
    rng: random.Random | None = None,
    geometry: BoardGeometry | None = None,
) -> World:
    """Build a world holding the session resources and the static board entities.

    Tiles themselves are created by GameSessionSystem; their entity ids double
    as the stable tile ids stored in the Grid.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    geometry = geometry or compute_board_geometry(size=size)
    setattr(world, "geometry", geometry)

    # Session resources live together on one entity.
    world.create_entity(
        GameState(mode=GameMode.RUNNING),
        ScoreState(),
        Grid(size=size),
    )

    top = geometry.bottom + geometry.extent
    center_x = geometry.left + geometry.extent / 2
    world.create_entity(
        ScoreDisplay(),
        Transform(x=center_x, y=top + SCORE_BAR_HEIGHT / 2, z=2.0),
    )
    world.create_entity(
        GameOverBanner(),
        Transform(x=center_x, y=geometry.bottom + geometry.extent / 2, z=3.0),
        Scale(1.0),
    )

    for y in range(size):
        for x in range(size):
            base = geometry.cell_center((x, y), z=0.0)
            world.create_entity(
                BackgroundCell(coord=(x, y), base=base),
                Transform(*base),
            )
    return world
