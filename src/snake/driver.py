# driver.py
import logging
from typing import Callable, Optional, Union

import pygame # type: ignore

from .config import TICK_MS

logger = logging.getLogger(__name__)

# Posted by pygame's repeating timer into the normal event queue, so ticks are
# serialized with keyboard and mouse events on the main loop.
TICK_EVENT = pygame.USEREVENT + 1


class TickDriver:
    """
    Fixed-interval scheduler for GameState.step().

    Holds at most one repeating pygame timer. start_loop() and stop_loop()
    are both idempotent. Each start tags its tick events with a fresh run
    number, so ticks still queued from an earlier run are dropped even if a
    new run has started since.
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        interval_ms: int = TICK_MS,
        set_timer: Optional[Callable[[Union[int, pygame.event.Event], int], None]] = None,
    ):
        self.on_tick = on_tick
        self.interval_ms = interval_ms
        self._set_timer = set_timer or pygame.time.set_timer
        self.scheduled = False
        self.run = 0

    def start_loop(self) -> None:
        if self.scheduled:
            return
        self.run += 1
        self._set_timer(pygame.event.Event(TICK_EVENT, run=self.run), self.interval_ms)
        self.scheduled = True
        logger.debug("Tick timer scheduled every %d ms (run %d)", self.interval_ms, self.run)

    def stop_loop(self) -> None:
        if not self.scheduled:
            return
        self._set_timer(TICK_EVENT, 0)
        self.scheduled = False
        logger.debug("Tick timer stopped (run %d)", self.run)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Consume tick events. Ticks from a stopped run are dropped."""
        if event.type != TICK_EVENT:
            return False
        if self.scheduled and getattr(event, "run", None) == self.run:
            self.on_tick()
        return True
