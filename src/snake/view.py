# view.py
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pygame # type: ignore

from .config import (
    CELL_SIZE, GRID_SIZE, BOARD_PX, PANEL_H, WIDTH,
    CELL_FILL, CELL_STROKE, FOOD_FILL, FOOD_STROKE,
    HEAD_FILL, BODY_FILL, SNAKE_STROKE,
    PANEL_BG, BUTTON_BG, TEXT, ALERT,
)
from .game import Cell, STATUS_READY

Color = Tuple[int, int, int]


@dataclass
class Button:
    action: str     # "start", "pause", "restart" or a direction name
    label: str
    rect: pygame.Rect


def default_buttons() -> List[Button]:
    """Start / Pause / Restart row on the left, direction pad on the right."""
    top = BOARD_PX + 8
    row = BOARD_PX + 50
    return [
        Button("start", "Start", pygame.Rect(10, row, 80, 30)),
        Button("pause", "Pause", pygame.Rect(100, row, 80, 30)),
        Button("restart", "Restart", pygame.Rect(190, row, 80, 30)),
        Button("up", "^", pygame.Rect(316, top + 30, 36, 30)),
        Button("left", "<", pygame.Rect(276, top + 64, 36, 30)),
        Button("down", "v", pygame.Rect(316, top + 64, 36, 30)),
        Button("right", ">", pygame.Rect(356, top + 64, 36, 30)),
    ]


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, fill: Color, stroke: Color) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, fill, rect)
    pygame.draw.rect(screen, stroke, rect, 1)


class PygameView:
    """
    Draws the board and the HUD panel onto a pygame surface.

    render() redraws the board from the snake and food it is given;
    update_hud() redraws only the panel under it. Flipping the display is
    left to the main loop.
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font
        self.buttons = default_buttons()

        self.score = 0
        self.status = STATUS_READY
        self.is_game_over = False

    # ----- Presenter -----
    def render(self, snake: Sequence[Cell], food: Optional[Cell]) -> None:
        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                draw_cell(self.screen, x, y, CELL_FILL, CELL_STROKE)

        if food is not None:
            draw_cell(self.screen, food[0], food[1], FOOD_FILL, FOOD_STROKE)

        for i, (x, y) in enumerate(snake):
            draw_cell(self.screen, x, y, HEAD_FILL if i == 0 else BODY_FILL, SNAKE_STROKE)

        if self.is_game_over:
            self.draw_game_over()

    def update_hud(self, score: int, status: str, is_game_over: bool) -> None:
        self.score = score
        self.status = status
        self.is_game_over = is_game_over
        self.draw_panel()

    # ----- Drawing -----
    def draw_panel(self) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, pygame.Rect(0, BOARD_PX, WIDTH, PANEL_H))

        score_txt = self.font.render(f"Score: {self.score}", True, TEXT)
        status_txt = self.font.render(self.status, True, ALERT if self.is_game_over else TEXT)
        self.screen.blit(score_txt, (10, BOARD_PX + 12))
        self.screen.blit(status_txt, (120, BOARD_PX + 12))

        for button in self.buttons:
            pygame.draw.rect(self.screen, BUTTON_BG, button.rect, border_radius=4)
            label = self.font.render(button.label, True, TEXT)
            self.screen.blit(label, label.get_rect(center=button.rect.center))

    def draw_game_over(self) -> None:
        # Dim the board with a translucent overlay
        overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render(self.status.upper(), True, (240, 240, 250))
        sub   = self.font.render("Press Start or Restart", True, TEXT)
        sco   = self.font.render(f"Score: {self.score}", True, TEXT)

        self.screen.blit(title, title.get_rect(center=(BOARD_PX // 2, BOARD_PX // 2 - 16)))
        self.screen.blit(sub, sub.get_rect(center=(BOARD_PX // 2, BOARD_PX // 2 + 16)))
        self.screen.blit(sco, sco.get_rect(center=(BOARD_PX // 2, BOARD_PX // 2 + 44)))

    # ----- Hit testing -----
    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                return button.action
        return None
