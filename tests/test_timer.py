import pytest

from gamebox.tetris.timer import DEFAULT_INTERVAL, HIGH_SPEED, SLOW_SPEED, Timer


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def setup():
    clock = FakeClock()
    calls = []
    timer = Timer(calls.append, clock)
    return timer, clock, calls


def test_default_interval(setup):
    timer, _, _ = setup
    assert timer.interval == DEFAULT_INTERVAL


def test_no_fire_before_interval(setup):
    timer, clock, calls = setup
    clock.now += DEFAULT_INTERVAL / 2
    assert timer.drive() is False
    assert calls == []


def test_fires_with_elapsed_and_resets(setup):
    timer, clock, calls = setup
    clock.now += 1.5
    assert timer.drive() is True
    assert calls == [pytest.approx(1.5)]
    assert timer.elapsed == 0
    clock.now += 0.5
    assert timer.drive() is False
    assert len(calls) == 1


def test_reset_restarts_count(setup):
    timer, clock, calls = setup
    clock.now += 0.9
    timer.reset()
    clock.now += 0.9
    assert timer.drive() is False
    assert calls == []


def test_interval_clamped_high(setup):
    timer, _, _ = setup
    timer.interval = 10
    assert timer.interval == SLOW_SPEED


def test_interval_clamped_low(setup):
    timer, _, _ = setup
    timer.interval = 0.001
    assert timer.interval == HIGH_SPEED


def test_interval_within_range_kept(setup):
    timer, clock, calls = setup
    timer.interval = 2.0
    assert timer.interval == 2.0
    clock.now += 1.5
    assert timer.drive() is False
    clock.now += 0.5
    assert timer.drive() is True
    assert len(calls) == 1


def test_without_callback_never_fires():
    clock = FakeClock()
    timer = Timer(None, clock)
    clock.now += 10
    assert timer.drive() is False
    assert timer.elapsed == pytest.approx(10)