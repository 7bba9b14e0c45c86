import pytest

from tilemerge.components.animation_chase import NumberChase
from tilemerge.components.animation_move import MoveTo
from tilemerge.components.animation_scale import ScaleTo
from tilemerge.systems.tween_ops import lerp, lerp_point, step_chase, step_move, step_scale
from tilemerge.utils.easing import Easing, ease


A = (0.0, 0.0, 1.0)
B = (10.0, 20.0, 1.0)


def test_lerp_helpers():
    assert lerp(2.0, 4.0, 0.5) == 3.0
    assert lerp_point(A, B, 0.5) == (5.0, 10.0, 1.0)


def test_move_with_full_duration_step_lands_on_end_and_finishes():
    move = MoveTo(start=A, end=B, duration=1.0, easing=Easing.EASE_OUT_BACK)
    point, finished = step_move(move, 1.0)
    assert finished
    assert point == B


def test_move_overshoot_step_clamps_to_end():
    move = MoveTo(start=A, end=B, duration=0.15)
    point, finished = step_move(move, 0.5)
    assert finished
    assert point == B


def test_move_partial_step_uses_easing():
    move = MoveTo(start=A, end=B, duration=1.0, easing=Easing.EASE_IN_CIRC)
    point, finished = step_move(move, 0.5)
    expected = ease(Easing.EASE_IN_CIRC, 0.5)
    assert not finished
    assert point[0] == pytest.approx(10.0 * expected)
    assert point[1] == pytest.approx(20.0 * expected)


def test_bounce_move_goes_out_and_back_once():
    move = MoveTo(start=A, end=B, duration=1.0, easing=Easing.EASE_IN_CIRC, loop_count=1, bounce=True)

    point, finished = step_move(move, 1.0)
    assert not finished
    assert point == pytest.approx(B)
    assert move.start == B and move.end == A
    assert move.loop_count == 0
    assert move.elapsed == pytest.approx(0.0)

    point, finished = step_move(move, 1.0)
    assert finished
    assert point == A


def test_looping_move_wraps_elapsed_and_keeps_running():
    move = MoveTo(start=A, end=B, duration=1.0, easing=Easing.EASE_IN_CIRC, loop_count=2)
    point, finished = step_move(move, 1.5)
    assert not finished
    assert move.loop_count == 1
    assert move.elapsed == pytest.approx(0.5)
    assert move.start == A

    point, finished = step_move(move, 0.25)
    assert not finished
    assert point[0] == pytest.approx(10.0 * ease(Easing.EASE_IN_CIRC, 0.75))


def test_move_without_start_cannot_step():
    with pytest.raises(ValueError):
        step_move(MoveTo(end=B, duration=1.0), 0.1)


@pytest.mark.parametrize("factory", [
    lambda: MoveTo(end=B, duration=0),
    lambda: ScaleTo(end=1.0, duration=-1),
    lambda: NumberChase(start=0, end=1, duration=0),
    lambda: NumberChase(start=0, end=1, duration=1, delay=-0.1),
])
def test_invalid_tween_parameters_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_scale_finishes_on_end_value():
    scale = ScaleTo(start=1.0, end=0.0, duration=0.35, easing=Easing.EASE_IN_CIRC)
    value, finished = step_scale(scale, 0.2)
    assert not finished
    assert 0.0 < value < 1.0
    value, finished = step_scale(scale, 0.2)
    assert finished
    assert value == 0.0


def test_looping_scale_never_finishes():
    scale = ScaleTo(start=1.0, end=1.15, duration=0.8, easing=Easing.EASE_IN_OUT_CIRC, looping=True)
    for _ in range(100):
        value, finished = step_scale(scale, 0.3)
        assert not finished
        assert 1.0 - 1e-9 <= value <= 1.15 + 1e-9
    assert scale.elapsed < scale.duration


def test_chase_holds_start_during_delay():
    chase = NumberChase(start=0, end=100, duration=0.5, delay=0.15)
    assert chase.current == 0

    value, finished = step_chase(chase, 0.1)
    assert (value, finished) == (0, False)

    value, finished = step_chase(chase, 0.1)
    assert not finished
    assert 0 < value < 100

    value, finished = step_chase(chase, 0.5)
    assert finished
    assert value == 100
    assert chase.current == 100


def test_chase_without_delay_counts_immediately():
    chase = NumberChase(start=10, end=20, duration=1.0, easing=Easing.EASE_IN_OUT_CIRC)
    value, finished = step_chase(chase, 0.5)
    assert not finished
    assert value == pytest.approx(15.0)
