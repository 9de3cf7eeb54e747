# src/snake/__init__.py
"""Grid snake: game state, tick driver and pygame front end."""

from .config import Direction, Config, GRID_SIZE, TICK_MS
from .game import GameState, spawn_food, is_opposite
from .driver import TickDriver, TICK_EVENT

__all__ = [
    "Direction", "Config", "GRID_SIZE", "TICK_MS",
    "GameState", "spawn_food", "is_opposite",
    "TickDriver", "TICK_EVENT",
]
