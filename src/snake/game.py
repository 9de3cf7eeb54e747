# game.py
import logging
import random
from typing import List, Optional, Protocol, Sequence, Tuple

from .config import GRID_SIZE, Direction

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ----- HUD status strings -----
STATUS_READY = "Ready"
STATUS_RUNNING = "Running"
STATUS_PAUSED = "Paused"
STATUS_GAME_OVER = "Game Over"
STATUS_WIN = "You Win"


class Presenter(Protocol):
    def render(self, snake: Sequence[Cell], food: Optional[Cell]) -> None: ...

    def update_hud(self, score: int, status: str, is_game_over: bool) -> None: ...


class Loop(Protocol):
    def start_loop(self) -> None: ...

    def stop_loop(self) -> None: ...


# ---------- Helpers ----------
def spawn_food(
    snake: Sequence[Cell],
    grid_size: int = GRID_SIZE,
    rng: Optional[random.Random] = None,
) -> Optional[Cell]:
    """
    Pick a uniformly random free cell by rejection sampling.
    Returns None when the snake covers the whole board.
    """
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        return None

    rng = rng or random
    while True:
        food = (rng.randrange(grid_size), rng.randrange(grid_size))
        if food not in occupied:
            return food


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx + b.dx == 0 and a.dy + b.dy == 0


# ---------- State ----------
class GameState:
    """
    The single mutable game object.

    Lifecycle: Ready -> Running <-> Paused -> Game Over, and back to Ready
    only through restart() or start(). Every method runs to completion on the
    event-loop thread; input handlers and timer ticks must never overlap.
    """

    def __init__(
        self,
        presenter: Optional[Presenter] = None,
        driver: Optional[Loop] = None,
        rng: Optional[random.Random] = None,
        grid_size: int = GRID_SIZE,
    ):
        self.presenter = presenter
        self.driver = driver
        self.rng = rng or random.Random()
        self.grid_size = grid_size

        self.snake: List[Cell] = []   # head at index 0
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.food: Optional[Cell] = None
        self.score = 0
        self.running = False
        self.paused = False
        self.game_over = False
        self.status = STATUS_READY

        self.reset()

    # ----- lifecycle -----
    def reset(self) -> None:
        mid = self.grid_size // 2
        self.snake = [(mid, mid), (mid - 1, mid)]
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.score = 0
        self.running = False
        self.paused = False
        self.game_over = False
        self.food = spawn_food(self.snake, self.grid_size, self.rng)
        self._update_hud(STATUS_READY)
        self.redraw()

    def start(self) -> None:
        if self.running and not self.paused:
            return
        if self.game_over:
            self.reset()
        self.running = True
        self.paused = False
        logger.info("Game started")
        self._update_hud(STATUS_RUNNING)
        if self.driver is not None:
            self.driver.start_loop()
        self.redraw()

    def pause(self) -> None:
        if not self.paused:
            self.toggle_pause()

    def resume(self) -> None:
        if self.paused:
            self.toggle_pause()

    def toggle_pause(self) -> None:
        """Flip the pause flag. The tick driver keeps firing; step() ignores it."""
        if not self.running or self.game_over:
            return
        self.paused = not self.paused
        self._update_hud(STATUS_PAUSED if self.paused else STATUS_RUNNING)

    def restart(self) -> None:
        if self.driver is not None:
            self.driver.stop_loop()
        logger.info("Game restarted")
        self.reset()

    def end_game(self, message: str) -> None:
        self.game_over = True
        self.running = False
        if self.driver is not None:
            self.driver.stop_loop()
        logger.info("%s (score=%d, length=%d)", message, self.score, len(self.snake))
        self._update_hud(message)
        self.redraw()

    # ----- input -----
    def set_direction(self, candidate: Optional[Direction]) -> None:
        """Queue a turn for the next tick. Reversing the current heading is ignored."""
        if candidate is None or is_opposite(candidate, self.direction):
            logger.debug("Rejected direction %s while heading %s", candidate, self.direction)
            return
        self.pending = candidate

    # ----- tick -----
    def step(self) -> None:
        """Advance the game by one tick."""
        if not self.running or self.paused or self.game_over:
            return

        # Commit direction once per tick
        self.direction = self.pending

        hx, hy = self.snake[0]
        new_head = (hx + self.direction.dx, hy + self.direction.dy)

        # Wall collision
        if not self._in_bounds(new_head):
            self.end_game(STATUS_GAME_OVER)
            return

        # Self collision, tail included (it has not moved yet)
        if new_head in self.snake:
            self.end_game(STATUS_GAME_OVER)
            return

        self.snake.insert(0, new_head)

        # Grow / move
        if self.food is not None and new_head == self.food:
            self.score += 1
            self.food = spawn_food(self.snake, self.grid_size, self.rng)
            if self.food is None:
                self.end_game(STATUS_WIN)
                return
        else:
            self.snake.pop()

        self._update_hud(STATUS_PAUSED if self.paused else STATUS_RUNNING)
        self.redraw()

    # ----- presentation -----
    def redraw(self) -> None:
        if self.presenter is not None:
            self.presenter.render(self.snake, self.food)

    def _update_hud(self, status: str) -> None:
        self.status = status
        if self.presenter is not None:
            self.presenter.update_hud(self.score, status, self.game_over)

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size
