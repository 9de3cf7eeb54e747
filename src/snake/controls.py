# controls.py
from typing import Dict, Optional

import pygame # type: ignore

from .config import Direction
from .game import GameState
from .view import PygameView

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def dispatch_action(state: GameState, action: str) -> None:
    """Apply a button action: start, pause, restart or a direction name. Unknown names are ignored."""
    if action == "start":
        state.start()
    elif action == "pause":
        state.toggle_pause()
    elif action == "restart":
        state.restart()
    elif action.upper() in Direction.__members__:
        state.set_direction(Direction.from_name(action))


def handle_event(event: pygame.event.Event, state: GameState, view: Optional[PygameView] = None) -> bool:
    """Route one input event into the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key in KEY_DIRECTIONS:
            state.set_direction(KEY_DIRECTIONS[event.key])
        elif event.key == pygame.K_SPACE:
            state.toggle_pause()

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and view is not None:
        action = view.button_at(event.pos)
        if action is not None:
            dispatch_action(state, action)

    return True
