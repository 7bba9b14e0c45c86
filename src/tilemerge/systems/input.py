from __future__ import annotations

from typing import Iterable, Mapping

from tilemerge.events.bus import (
    EVENT_DIRECTION_INPUT,
    EVENT_KEY_PRESS,
    EVENT_RESTART_REQUESTED,
    EventBus,
)
from tilemerge.systems.grid_ops import Direction


class InputSystem:
    """Translates raw key presses into direction and restart requests.

    Key presses are edge-triggered by the window, so holding a key yields a
    single request. Unmapped keys are ignored.
    """

    def __init__(
        self,
        event_bus: EventBus,
        keymap: Mapping[int, Direction],
        restart_keys: Iterable[int] = (),
    ):
        self.event_bus = event_bus
        self.keymap = dict(keymap)
        self.restart_keys = frozenset(restart_keys)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(symbol, kwargs.get('modifiers', 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        if symbol in self.restart_keys:
            self.event_bus.emit(EVENT_RESTART_REQUESTED)
            return
        direction = self.keymap.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_DIRECTION_INPUT, direction=direction)
