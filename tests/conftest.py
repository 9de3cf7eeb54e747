import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame # type: ignore

from snake.game import GameState


class FakePresenter:
    """Records every render / HUD call."""

    def __init__(self):
        self.renders = []
        self.huds = []

    def render(self, snake, food):
        self.renders.append((list(snake), food))

    def update_hud(self, score, status, is_game_over):
        self.huds.append((score, status, is_game_over))

    @property
    def last_status(self):
        return self.huds[-1][1]


class FakeDriver:
    def __init__(self):
        self.scheduled = False
        self.starts = 0
        self.stops = 0

    def start_loop(self):
        self.starts += 1
        self.scheduled = True

    def stop_loop(self):
        self.stops += 1
        self.scheduled = False


@pytest.fixture
def presenter():
    return FakePresenter()


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def state(presenter, driver):
    return GameState(presenter=presenter, driver=driver, rng=random.Random(7))


@pytest.fixture(scope="session")
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
