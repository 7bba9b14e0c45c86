from tilemerge.components.game_over_banner import GameOverBanner
from tilemerge.constants import START_TILES
from tilemerge.events.bus import EVENT_DIRECTION_INPUT
from tilemerge.systems.frame import run_frame
from tilemerge.systems.grid_ops import Direction
from tilemerge.systems.render import CELL_COLOR, TILE_COLORS, RenderSystem, tile_color
from tilemerge.utils.resources import get_banner_entity
from tests.helpers import build_session, drive_frames, place_tile


class DummyWindow:
    width = 600
    height = 600


def test_tile_colors_by_score():
    assert tile_color(0) == CELL_COLOR
    assert tile_color(2) == TILE_COLORS[0]
    assert tile_color(4) == TILE_COLORS[1]
    assert tile_color(1 << 20) == TILE_COLORS[-1]


def test_frame_lists_cells_tiles_and_score():
    s = build_session(start_tiles=START_TILES)
    render = RenderSystem(s.world, s.bus, DummyWindow())
    frame = render.build_frame()
    kinds = [item['kind'] for item in frame]
    assert kinds.count('cell') == 16
    assert kinds.count('tile') == 2
    assert kinds.count('banner') == 0
    score = next(item for item in frame if item['kind'] == 'score')
    assert score['text'] == "Score: 0"
    assert [item['z'] for item in frame] == sorted(item['z'] for item in frame)


def test_banner_drawn_only_when_visible():
    s = build_session()
    render = RenderSystem(s.world, s.bus, DummyWindow())
    banner_entity = get_banner_entity(s.world)
    s.world.component_for_entity(banner_entity, GameOverBanner).visible = True
    banners = [item for item in render.build_frame() if item['kind'] == 'banner']
    assert len(banners) == 1
    assert banners[0]['text'] == "Game Over"


def test_dying_tile_drawn_below_survivor_then_forgotten():
    s = build_session()
    render = RenderSystem(s.world, s.bus, DummyWindow())
    resting = place_tile(s.world, (0, 0), 2)
    mover = place_tile(s.world, (1, 0), 2)
    s.bus.emit(EVENT_DIRECTION_INPUT, direction=Direction.LEFT)
    run_frame(s.bus, 0.02)

    tiles = [item for item in render.build_frame() if item['kind'] == 'tile']
    ids = [item['id'] for item in tiles]
    assert ids.index(resting) < ids.index(mover)
    assert resting in render.drawables

    drive_frames(s.bus, count=40)
    assert resting not in render.drawables
    assert resting not in [item.get('id') for item in render.build_frame()]
