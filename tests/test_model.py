import random

import pytest

from particlebox.model import TIMER_UPDATE_FREQ, App, Body, Timer, TimerKind, rng_range
from particlebox.vec import Vec2


def _fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_timer_logs_on_update_frame():
    timer = Timer(clock=_fake_clock([1.0, 1.5]))
    timer.start()
    timer.stop()
    assert timer.log(0) == pytest.approx(500.0)
    assert timer.duration == pytest.approx(500.0)


def test_timer_keeps_old_duration_between_updates():
    timer = Timer(clock=_fake_clock([0.0, 0.25, 1.0, 3.0]))
    timer.start()
    timer.stop()
    first = timer.log(TIMER_UPDATE_FREQ)
    timer.start()
    timer.stop()
    assert timer.log(1) == first
    assert timer.log(TIMER_UPDATE_FREQ * 2) != first


def test_rng_range_stays_in_bounds():
    rng = random.Random(7)
    values = [rng_range(5, 9, rng) for _ in range(300)]
    assert min(values) >= 5
    assert max(values) <= 9


def test_rng_range_is_inclusive():
    rng = random.Random(3)
    assert {rng_range(0, 1, rng) for _ in range(200)} == {0, 1}


def test_rng_range_single_value():
    assert rng_range(4, 4, random.Random(1)) == 4


def test_rng_range_empty_raises():
    with pytest.raises(ValueError):
        rng_range(3, 2)


def test_app_defaults_match_initial_conditions():
    app = App()
    assert app.running and app.debug
    assert not app.click and not app.pause
    assert app.obj_count == 10
    assert app.mouse_pos == Vec2(0, 0)


def test_body_vectors_are_independent():
    a, b = Body(), Body()
    a.pos = Vec2(1.0, 2.0)
    assert b.pos == Vec2()


def test_timers_per_kind_are_independent():
    timers = {
        kind: Timer(clock=_fake_clock([0.0, 0.001 * (n + 1)]))
        for n, kind in enumerate(TimerKind)
    }
    for timer in timers.values():
        timer.start()
        timer.stop()
        timer.log(0)
    for n, kind in enumerate(TimerKind):
        assert timers[kind].duration == pytest.approx(1.0 * (n + 1))