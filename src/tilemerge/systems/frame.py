from tilemerge.events.bus import EVENT_ANIMATE, EVENT_SCORE_DRAIN, EVENT_TICK, EventBus


def run_frame(event_bus: EventBus, dt: float) -> None:
    """Advance the game by one frame.

    Phases run in a fixed order: input and merge resolution, score draining,
    then tween advancement. Tweens requested in the first two phases are
    attached at the end of the third and first advance on the next frame.
    """
    event_bus.emit(EVENT_TICK, dt=dt)
    event_bus.emit(EVENT_SCORE_DRAIN, dt=dt)
    event_bus.emit(EVENT_ANIMATE, dt=dt)
