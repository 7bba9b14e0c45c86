"""Entry point for the tilemerge sliding-tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, color, key, run, set_background_color

from tilemerge.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from tilemerge.events.bus import EVENT_KEY_PRESS, EventBus
from tilemerge.systems.frame import run_frame
from tilemerge.systems.grid_ops import Direction
from tilemerge.systems.input import InputSystem
from tilemerge.systems.render import RenderSystem
from tilemerge.systems.score import ScoreSystem
from tilemerge.systems.session import GameSessionSystem
from tilemerge.systems.tween import TweenSystem
from tilemerge.world import create_world

KEYMAP = {
    key.UP: Direction.UP,
    key.W: Direction.UP,
    key.DOWN: Direction.DOWN,
    key.S: Direction.DOWN,
    key.LEFT: Direction.LEFT,
    key.A: Direction.LEFT,
    key.RIGHT: Direction.RIGHT,
    key.D: Direction.RIGHT,
}
RESTART_KEYS = (key.R, key.SPACE)


class TileMergeWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=False)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Input systems
        self.input_system = InputSystem(self.event_bus, KEYMAP, restart_keys=RESTART_KEYS)

        # Session systems
        self.session_system = GameSessionSystem(self.world, self.event_bus)
        self.score_system = ScoreSystem(self.world, self.event_bus)

        # Animation and interface systems
        self.tween_system = TweenSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(color.GRAY)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        run_frame(self.event_bus, delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = TileMergeWindow()
    run()

if __name__ == "__main__":
    main()
