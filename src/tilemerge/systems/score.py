from esper import World

from tilemerge.animation_factory import AnimationFactory
from tilemerge.components.score_display import ScoreDisplay
from tilemerge.events.bus import EVENT_SCORE_CHANGED, EVENT_SCORE_DRAIN, EventBus
from tilemerge.systems.tween import KIND_CHASE
from tilemerge.ui.layout import compute_board_geometry
from tilemerge.utils.resources import get_score_display_entity, get_score_state


class ScoreSystem:
    """Applies queued score changes once per frame.

    The pre-drain total stays readable on ScoreState.previous until the next
    drain phase. Additions start a chase on the score display; a reset snaps it.
    """

    def __init__(self, world: World, event_bus: EventBus, factory: AnimationFactory | None = None):
        self.world = world
        self.event_bus = event_bus
        geometry = getattr(world, "geometry", None) or compute_board_geometry()
        self.factory = factory or AnimationFactory(event_bus, geometry)
        self.event_bus.subscribe(EVENT_SCORE_DRAIN, self.on_score_drain)

    def on_score_drain(self, sender, **kwargs):
        score = get_score_state(self.world)
        if not score.pending:
            score.previous = None
            return
        reset = score.drain()
        previous = score.previous
        self.event_bus.emit(EVENT_SCORE_CHANGED, previous=previous, total=score.total, reset=reset)
        display_entity = get_score_display_entity(self.world)
        if display_entity is None:
            return
        if reset:
            self.factory.cancel(display_entity, KIND_CHASE)
            self.world.component_for_entity(display_entity, ScoreDisplay).value = score.total
        elif score.total != previous:
            self.factory.chase_score(display_entity, previous, score.total)
