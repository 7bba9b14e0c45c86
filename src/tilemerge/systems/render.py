from __future__ import annotations

import math
from typing import Any, Dict, List

from esper import World

from tilemerge.components.background_cell import BackgroundCell
from tilemerge.components.game_over_banner import GameOverBanner
from tilemerge.components.scale import Scale
from tilemerge.components.score_display import ScoreDisplay
from tilemerge.components.tile import Tile
from tilemerge.components.transform import Transform
from tilemerge.events.bus import EVENT_TILE_DESPAWNED, EventBus
from tilemerge.ui.layout import compute_board_geometry

# (r, g, b) by log2(score); scores past the end reuse the last entry.
TILE_COLORS = [
    (238, 228, 218),
    (237, 224, 200),
    (242, 177, 121),
    (245, 149, 99),
    (246, 124, 95),
    (246, 94, 59),
    (237, 207, 114),
    (237, 204, 97),
    (237, 200, 80),
    (237, 197, 63),
    (237, 194, 46),
]
CELL_COLOR = (205, 193, 180)
TEXT_DARK = (119, 110, 101)
TEXT_LIGHT = (249, 246, 242)


def tile_color(score: int):
    if score <= 0:
        return CELL_COLOR
    index = min(int(math.log2(score)) - 1, len(TILE_COLORS) - 1)
    return TILE_COLORS[max(index, 0)]


class RenderSystem:
    """Reads grid, tween and score state and draws them.

    ``build_frame`` collects the draw list without touching arcade so tests
    stay headless; ``process`` draws that list when a window is active.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.geometry = getattr(world, "geometry", None) or compute_board_geometry(window.width, window.height)
        # tile id -> last drawn entry; the presentation side of the tile arena.
        self.drawables: Dict[int, Dict[str, Any]] = {}
        self.last_frame: List[Dict[str, Any]] = []
        self.event_bus.subscribe(EVENT_TILE_DESPAWNED, self.on_tile_despawned)

    def on_tile_despawned(self, sender, **kwargs):
        self.drawables.pop(kwargs.get('entity'), None)

    def build_frame(self) -> List[Dict[str, Any]]:
        size = self.geometry.tile_size
        frame: List[Dict[str, Any]] = []
        for _, (cell, transform) in self.world.get_components(BackgroundCell, Transform):
            frame.append({'kind': 'cell', 'x': transform.x, 'y': transform.y, 'z': transform.z, 'size': size})
        for ent, (tile, transform, scale) in self.world.get_components(Tile, Transform, Scale):
            entry = {
                'kind': 'tile',
                'id': tile.id,
                'x': transform.x,
                'y': transform.y,
                'z': transform.z,
                'size': size * scale.value,
                'score': tile.score,
            }
            self.drawables[tile.id] = entry
            frame.append(entry)
        for _, (display, transform) in self.world.get_components(ScoreDisplay, Transform):
            frame.append({'kind': 'score', 'x': transform.x, 'y': transform.y, 'z': transform.z,
                          'text': f"Score: {int(round(display.value))}"})
        for _, (banner, transform, scale) in self.world.get_components(GameOverBanner, Transform, Scale):
            if banner.visible:
                frame.append({'kind': 'banner', 'x': transform.x, 'y': transform.y, 'z': transform.z,
                              'text': banner.text, 'font_size': 36 * scale.value})
        frame.sort(key=lambda item: item['z'])
        self.last_frame = frame
        return frame

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        frame = self.build_frame()
        try:
            arcade.get_window()
        except RuntimeError:
            return
        for item in frame:
            kind = item['kind']
            if kind in ('cell', 'tile'):
                half = item['size'] / 2
                if half <= 0:
                    continue
                color = CELL_COLOR if kind == 'cell' else tile_color(item['score'])
                arcade.draw_lrbt_rectangle_filled(
                    item['x'] - half, item['x'] + half, item['y'] - half, item['y'] + half, color,
                )
                if kind == 'tile':
                    text_color = TEXT_DARK if item['score'] <= 4 else TEXT_LIGHT
                    arcade.draw_text(
                        str(item['score']), item['x'], item['y'], text_color,
                        font_size=max(item['size'] / 4, 1), anchor_x="center", anchor_y="center",
                    )
            elif kind == 'score':
                arcade.draw_text(item['text'], item['x'], item['y'], TEXT_LIGHT,
                                 font_size=24, anchor_x="center", anchor_y="center")
            elif kind == 'banner':
                arcade.draw_text(item['text'], item['x'], item['y'], TEXT_LIGHT,
                                 font_size=item['font_size'], anchor_x="center", anchor_y="center")
