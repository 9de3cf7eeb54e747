import random

import pygame # type: ignore

from snake.config import TICK_MS
from snake.driver import TICK_EVENT, TickDriver
from snake.game import GameState


class FakeTimer:
    """Stands in for pygame.time.set_timer and remembers the last armed event."""

    def __init__(self):
        self.calls = []
        self.armed = None

    def __call__(self, event, millis):
        event_type = event if isinstance(event, int) else event.type
        self.calls.append((event_type, millis))
        self.armed = event if millis else None

    def fire(self):
        """The event pygame would post for the currently armed timer."""
        return pygame.event.Event(self.armed.type, run=self.armed.run)


def make_driver(on_tick=None):
    ticks = []
    timer = FakeTimer()
    driver = TickDriver(on_tick or (lambda: ticks.append(1)), set_timer=timer)
    return driver, timer, ticks


def test_start_schedules_one_repeating_timer():
    driver, timer, _ = make_driver()
    driver.start_loop()
    driver.start_loop()
    assert timer.calls == [(TICK_EVENT, TICK_MS)]
    assert driver.scheduled


def test_stop_is_idempotent():
    driver, timer, _ = make_driver()
    driver.stop_loop()
    assert timer.calls == []
    driver.start_loop()
    driver.stop_loop()
    driver.stop_loop()
    assert timer.calls == [(TICK_EVENT, TICK_MS), (TICK_EVENT, 0)]
    assert not driver.scheduled


def test_tick_event_invokes_callback_while_scheduled():
    driver, timer, ticks = make_driver()
    driver.start_loop()
    assert driver.handle_event(timer.fire())
    assert driver.handle_event(timer.fire())
    assert ticks == [1, 1]


def test_stale_tick_after_stop_is_swallowed():
    driver, timer, ticks = make_driver()
    driver.start_loop()
    queued = timer.fire()
    driver.stop_loop()
    assert driver.handle_event(queued)
    assert ticks == []


def test_tick_from_previous_run_is_dropped_after_restart():
    driver, timer, ticks = make_driver()
    driver.start_loop()
    queued = timer.fire()
    driver.stop_loop()
    driver.start_loop()

    assert driver.handle_event(queued)
    assert ticks == []
    driver.handle_event(timer.fire())
    assert ticks == [1]


def test_untagged_tick_is_ignored():
    driver, _, ticks = make_driver()
    driver.start_loop()
    assert driver.handle_event(pygame.event.Event(TICK_EVENT))
    assert ticks == []


def test_other_events_pass_through():
    driver, _, ticks = make_driver()
    driver.start_loop()
    assert not driver.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert ticks == []


def test_game_over_stops_the_timer():
    timer = FakeTimer()
    state = GameState(rng=random.Random(0))
    driver = TickDriver(state.step, interval_ms=50, set_timer=timer)
    state.driver = driver

    state.start()
    state.food = (0, 0)
    state.snake = [(19, 10), (18, 10)]
    queued = timer.fire()
    driver.handle_event(timer.fire())

    assert state.game_over
    assert not driver.scheduled
    assert timer.calls == [(TICK_EVENT, 50), (TICK_EVENT, 0)]

    # A tick that was already queued changes nothing
    before = list(state.snake)
    driver.handle_event(queued)
    assert state.snake == before


def test_restart_then_start_ignores_queued_tick():
    timer = FakeTimer()
    state = GameState(rng=random.Random(0))
    driver = TickDriver(state.step, set_timer=timer)
    state.driver = driver

    state.start()
    queued = timer.fire()
    state.restart()
    state.start()
    state.food = (0, 0)

    driver.handle_event(queued)
    assert state.snake == [(10, 10), (9, 10)]

    driver.handle_event(timer.fire())
    assert state.snake == [(11, 10), (10, 10)]


def test_start_after_game_over_ignores_queued_tick():
    timer = FakeTimer()
    state = GameState(rng=random.Random(0))
    driver = TickDriver(state.step, set_timer=timer)
    state.driver = driver

    state.start()
    state.snake = [(19, 10), (18, 10)]
    queued = timer.fire()
    driver.handle_event(timer.fire())
    assert state.game_over

    state.start()
    state.food = (0, 0)
    driver.handle_event(queued)
    assert state.snake == [(10, 10), (9, 10)]


def test_restart_stops_the_timer():
    timer = FakeTimer()
    state = GameState(rng=random.Random(0))
    state.driver = TickDriver(state.step, set_timer=timer)
    state.start()
    state.restart()
    assert not state.driver.scheduled
    assert timer.calls[-1] == (TICK_EVENT, 0)


def test_pause_keeps_the_timer_running():
    timer = FakeTimer()
    state = GameState(rng=random.Random(0))
    state.driver = TickDriver(state.step, set_timer=timer)
    state.start()
    state.toggle_pause()
    assert state.driver.scheduled
    assert timer.calls == [(TICK_EVENT, TICK_MS)]
