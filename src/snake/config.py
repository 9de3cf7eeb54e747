from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Window & grid -----
GRID_SIZE = 20
CELL_SIZE = 20
BOARD_PX = GRID_SIZE * CELL_SIZE
PANEL_H = 110
WIDTH, HEIGHT = BOARD_PX, BOARD_PX + PANEL_H

# ----- Colors -----
CELL_FILL   = (250, 250, 247)
CELL_STROKE = (231, 229, 222)
FOOD_FILL   = (209, 168, 88)
FOOD_STROKE = (155, 125, 63)
HEAD_FILL   = (43, 92, 90)
BODY_FILL   = (79, 123, 121)
SNAKE_STROKE = (31, 63, 60)
PANEL_BG    = (36, 36, 40)
BUTTON_BG   = (70, 70, 78)
TEXT        = (220, 220, 230)
ALERT       = (200, 70, 70)

# ----- Timing -----
TICK_MS = 120


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Resolve 'up' / 'down' / 'left' / 'right' (any case)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    fps: int = 60

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

CFG = Config()
