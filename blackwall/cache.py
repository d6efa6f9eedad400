from __future__ import annotations

import logging
import random
from enum import Enum, auto

from .constants import (
    CACHE_CATCH_WINDOW,
    CACHE_FIRST_SPAWN_MAX,
    CACHE_RESPAWN_MIN,
    CACHE_RESPAWN_SPREAD,
)

logger = logging.getLogger(__name__)


class CacheState(Enum):
    """Visibility of the data cache bonus event."""

    DORMANT = auto()
    AVAILABLE = auto()


class DataCache:
    """Randomly spawning bonus event the player can intercept.

    While ``DORMANT`` the cache counts ``spawn_timer`` down to its next
    appearance. Once ``AVAILABLE`` it stays on screen for
    ``CACHE_CATCH_WINDOW`` seconds; catching it or letting the window lapse
    sends it back to ``DORMANT`` with a fresh random delay.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.state = CacheState.DORMANT
        self.spawn_timer = float(self.rng.randrange(CACHE_FIRST_SPAWN_MAX))
        self.active_timer = 0.0

    @property
    def available(self) -> bool:
        return self.state is CacheState.AVAILABLE

    def _respawn_delay(self) -> float:
        return float(CACHE_RESPAWN_MIN + self.rng.randrange(CACHE_RESPAWN_SPREAD))

    def _go_dormant(self) -> None:
        self.state = CacheState.DORMANT
        self.active_timer = 0.0
        self.spawn_timer = self._respawn_delay()

    def update(self, dt: float) -> None:
        """Advance whichever timer the current state owns."""
        if self.state is CacheState.DORMANT:
            self.spawn_timer = max(0.0, self.spawn_timer - dt)
            if self.spawn_timer <= 0:
                self.state = CacheState.AVAILABLE
                self.active_timer = CACHE_CATCH_WINDOW
                logger.debug("data cache spawned")
        else:
            self.active_timer = max(0.0, self.active_timer - dt)
            if self.active_timer <= 0:
                self._go_dormant()
                logger.debug(
                    "data cache expired, next spawn in %.0fs", self.spawn_timer
                )

    def catch(self) -> bool:
        """Intercept the cache. Returns ``False`` when nothing is on screen."""
        if not self.available:
            return False
        self._go_dormant()
        logger.debug("data cache caught, next spawn in %.0fs", self.spawn_timer)
        return True
