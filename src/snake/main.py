# main.py
import argparse
import logging
import random
from typing import List, Optional

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .controls import handle_event
from .driver import TickDriver
from .game import GameState
from .view import PygameView

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = CFG
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="seed for food placement (random if omitted)")
    parser.add_argument("--tick-ms", type=positive_int, default=defaults.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--fps", type=positive_int, default=defaults.fps,
                        help="frame rate cap for the event loop")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    view = PygameView(screen, font)
    state = GameState(presenter=view, rng=random.Random(cfg.seed))
    driver = TickDriver(state.step, interval_ms=cfg.tick_ms)
    state.driver = driver
    logger.info("Ready (tick=%d ms, seed=%s)", cfg.tick_ms, cfg.seed)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if driver.handle_event(event):
                    continue
                if not handle_event(event, state, view):
                    running = False
                    break

            pygame.display.flip()
            clock.tick(cfg.fps)  # movement is paced by the tick timer, not the frame rate
    finally:
        driver.stop_loop()
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    run(Config(seed=args.seed, tick_ms=args.tick_ms, fps=args.fps))


if __name__ == "__main__":
    main()
