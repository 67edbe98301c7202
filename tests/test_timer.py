import time

import pytest

from starforge.timer import GameTimer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def timer(clock):
    t = GameTimer(clock)
    t.reset()
    return t


def test_delta_starts_negative():
    assert GameTimer(FakeClock()).delta_time() == -1.0


def test_tick_measures_delta(clock, timer):
    clock.now = 100.5
    timer.tick()
    assert timer.delta_time() == 0.5
    clock.now = 100.75
    timer.tick()
    assert timer.delta_time() == 0.25


def test_total_time_after_ticks(clock, timer):
    clock.now = 102.0
    timer.tick()
    assert timer.total_time() == 2.0


def test_total_time_freezes_while_stopped(clock, timer):
    clock.now = 101.0
    timer.tick()
    timer.stop()
    assert timer.stopped
    clock.now = 105.0
    assert timer.total_time() == 1.0
    timer.tick()
    assert timer.delta_time() == 0.0


def test_paused_time_excluded_after_start(clock, timer):
    clock.now = 101.0
    timer.stop()
    clock.now = 104.0
    timer.start()
    assert not timer.stopped
    clock.now = 104.5
    timer.tick()
    assert timer.delta_time() == 0.5
    assert timer.total_time() == 1.5


def test_stop_twice_keeps_first_stop(clock, timer):
    clock.now = 101.0
    timer.stop()
    clock.now = 103.0
    timer.stop()
    assert timer.total_time() == 1.0


def test_start_without_stop_is_noop(clock, timer):
    clock.now = 101.0
    timer.start()
    clock.now = 102.0
    timer.tick()
    assert timer.total_time() == 2.0


def test_negative_delta_is_clamped(clock, timer):
    clock.now = 99.0
    timer.tick()
    assert timer.delta_time() == 0.0


def test_default_clock_is_monotonic():
    timer = GameTimer()
    timer.reset()
    time.sleep(0.01)
    timer.tick()
    assert timer.delta_time() > 0.0
    assert timer.total_time() >= timer.delta_time()