# Game loop and state management
from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Dict, List

from .constants import (
    AUTOSAVE_FEEDBACK_DURATION,
    AUTOSAVE_INTERVAL,
    BASE_CLICK_AMOUNT,
    BUFF_BASE_COST,
    BUFF_COST_SCALE_FACTOR,
    BUFF_STEP,
    BUY_BUFF_KEY,
    BUY_CLICK_SHARE_KEY,
    CACHE_BUFF_DURATION,
    CACHE_BUFF_PERCENT,
    CACHE_FEEDBACK_DURATION,
    CATCH_CACHE_KEY,
    CLICK_FEEDBACK_DURATION,
    CLICK_KEY,
    CLICK_SHARE_BASE_COST,
    CLICK_SHARE_COST_SCALE_FACTOR,
    CLICK_SHARE_STEP,
    EVENT_LOG_SIZE,
    HELP_KEY,
    LOAD_KEY,
    MIN_HEIGHT,
    MIN_WIDTH,
    QUIT_KEYS,
    SAVE_KEY,
    SAVE_PATH,
    TICK_RATE,
    UI_REFRESH_INTERVAL,
)
from .building import Building, BuildingBlueprint
from .cache import DataCache
from .world import World
from . import hud, savefile

logger = logging.getLogger(__name__)


def _countdown(timer: float, dt: float) -> float:
    return max(0.0, timer - dt)


class Game:
    """Owns game state and runs the main loop."""

    def __init__(
        self, seed: int | None = None, save_path: str | Path = SAVE_PATH
    ) -> None:
        self.rng = random.Random(seed)

        # Blueprints are loaded dynamically from ``blackwall.blueprints`` so
        # adding a new source only requires creating a new module.
        from .blueprints import BLUEPRINTS

        self.blueprints: Dict[str, BuildingBlueprint] = dict(BLUEPRINTS)
        self.buildings: List[Building] = [
            Building(bp) for bp in self.blueprints.values()
        ]
        self.hotkeys: Dict[str, int] = {
            b.blueprint.hotkey: idx for idx, b in enumerate(self.buildings)
        }

        # Economy
        self.lines = 0.0
        self.lines_per_second = 0.0
        self.buffs = 1.0
        self.buffs_bought = 0
        self.lps_to_click = 0.0
        self.click_shares_bought = 0
        self.click_boost = 1.0
        self.last_click_value = 0.0

        # Transient timers, all in seconds
        self.feedback_timer = 0.0
        self.autosave_timer = 0.0
        self.autosave_feedback_timer = 0.0
        self.cache = DataCache(self.rng)
        self.cache_buff_timer = 0.0
        self.active_alert = ""

        self.event_log: List[str] = []
        self.save_path = Path(save_path)
        self.autosave = True

        self.running = False
        self.tick_rate = TICK_RATE
        self.world = World(self.tick_rate)
        self.renderer = None
        self.show_help = False
        self.show_fps = False
        self.current_fps = 0.0
        self.last_tick_ms = 0.0

        # Track overlay state so the renderer can clear when toggled.
        self._prev_show_help = False
        # Session time when a full UI refresh should next occur
        self._next_ui_refresh = UI_REFRESH_INTERVAL

    # --- Economy ----------------------------------------------------
    @property
    def data_per_second(self) -> float:
        """Passive income including the overclock multiplier."""
        return self.lines_per_second * self.buffs

    def update_lps(self) -> None:
        """Recompute passive yield from owned sources."""
        self.lines_per_second = sum(b.lines_per_second() for b in self.buildings)

    def log_event(self, text: str) -> None:
        """Record a short message for the HUD."""
        self.event_log.append(text)
        if len(self.event_log) > EVENT_LOG_SIZE:
            self.event_log.pop(0)

    def buy_building(self, index: int) -> bool:
        if not 0 <= index < len(self.buildings):
            return False
        building = self.buildings[index]
        cost = building.next_cost()
        if self.lines < cost:
            return False
        self.lines -= cost
        building.count += 1
        self.update_lps()
        logger.debug("bought %s #%d for %.2f", building.name, building.count, cost)
        self.log_event(f"Acquired {building.name} ({building.count})")
        return True

    def buff_cost(self) -> float:
        return BUFF_BASE_COST * BUFF_COST_SCALE_FACTOR ** self.buffs_bought

    def buy_buff(self) -> bool:
        """Buy one step of the permanent overclock multiplier."""
        cost = self.buff_cost()
        if self.lines < cost:
            return False
        self.lines -= cost
        self.buffs += BUFF_STEP
        self.buffs_bought += 1
        self.update_lps()
        logger.debug("overclock now x%.2f (cost %.2f)", self.buffs, cost)
        self.log_event(f"Overclock x{self.buffs:.2f}")
        return True

    def click_share_cost(self) -> float:
        return (
            CLICK_SHARE_BASE_COST
            * CLICK_SHARE_COST_SCALE_FACTOR ** self.click_shares_bought
        )

    def buy_click_share(self) -> bool:
        """Buy one more percent of DATA/s added to every breach."""
        cost = self.click_share_cost()
        if self.lines < cost:
            return False
        self.lines -= cost
        self.lps_to_click += CLICK_SHARE_STEP
        self.click_shares_bought += 1
        logger.debug("click share now %.2f (cost %.2f)", self.lps_to_click, cost)
        self.log_event(f"Click share {self.lps_to_click * 100:.0f}%")
        return True

    # --- Actions ----------------------------------------------------
    def register_click(self) -> float:
        """Perform a manual breach and return the DATA it earned."""
        contribution = self.data_per_second * self.lps_to_click
        gained = (BASE_CLICK_AMOUNT + contribution) * self.click_boost
        self.lines += gained
        self.last_click_value = gained
        self.feedback_timer = CLICK_FEEDBACK_DURATION
        return gained

    def catch_cache(self) -> bool:
        """Intercept the data cache if it is on screen."""
        if not self.cache.catch():
            return False
        self.cache_buff_timer = CACHE_BUFF_DURATION
        self.click_boost = CACHE_BUFF_PERCENT
        self.active_alert = (
            f"BREACH PROTOCOL: {CACHE_BUFF_PERCENT:.0f}x DATA MINING "
            f"FOR {CACHE_BUFF_DURATION:.0f}s!"
        )
        self.feedback_timer = CACHE_FEEDBACK_DURATION
        self.log_event("Data cache intercepted")
        return True

    def save_game(self, notify: bool = True) -> bool:
        ok = savefile.save_game(self, self.save_path)
        if ok and notify:
            self.autosave_feedback_timer = AUTOSAVE_FEEDBACK_DURATION
        return ok

    def load_game(self) -> bool:
        ok = savefile.load_game(self, self.save_path)
        if ok:
            self.log_event("Progress restored")
        return ok

    # --- Simulation -------------------------------------------------
    def run_cycle(self, dt: float) -> None:
        """Accrue passive income for ``dt`` seconds."""
        self.lines += self.lines_per_second * dt * self.buffs

    def update_timers(self, dt: float) -> None:
        self.feedback_timer = _countdown(self.feedback_timer, dt)
        self.autosave_feedback_timer = _countdown(self.autosave_feedback_timer, dt)

        self.autosave_timer += dt
        if self.autosave_timer >= AUTOSAVE_INTERVAL:
            self.autosave_timer = 0.0
            if self.autosave:
                self.save_game()

        if self.cache_buff_timer > 0:
            self.cache_buff_timer = _countdown(self.cache_buff_timer, dt)
            if self.cache_buff_timer <= 0:
                self.click_boost = 1.0
                self.active_alert = ""
                logger.debug("cache boost expired")

        self.cache.update(dt)

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds of wall time."""
        dt = max(0.0, dt)
        self.world.tick(dt)
        self.run_cycle(dt)
        self.update_timers(dt)

    def handle_key(self, key: object) -> None:
        """Dispatch a single key press from blessed or curses."""
        if isinstance(key, int):
            key = chr(key) if 0 <= key < 0x110000 else ""
        key = str(key)
        if not key:
            return

        if key in QUIT_KEYS:
            self.running = False
        elif key == CLICK_KEY:
            self.register_click()
        elif key == BUY_BUFF_KEY:
            self.buy_buff()
        elif key == BUY_CLICK_SHARE_KEY:
            self.buy_click_share()
        elif key in self.hotkeys:
            self.buy_building(self.hotkeys[key])
        elif key == SAVE_KEY:
            self.save_game()
        elif key == LOAD_KEY:
            self.load_game()
        elif key == CATCH_CACHE_KEY:
            self.catch_cache()
        elif key.lower() == HELP_KEY:
            self.show_help = not self.show_help

    # --- Game Loop -----------------------------------------------------
    def status_line(self) -> str:
        status = (
            f"Uptime:{self.world.uptime} "
            f"Tick:{self.world.tick_count} "
            f"Sources:{sum(b.count for b in self.buildings)}"
        )
        if self.show_fps:
            status += f" FPS:{self.current_fps:.1f} ({self.last_tick_ms:.1f}ms)"
        return status

    def render(self) -> None:
        """Draw the current game state."""
        if self.renderer is None:
            return
        if self.world.elapsed >= self._next_ui_refresh:
            # Force a full redraw periodically to prevent UI artefacts
            self.renderer.clear()
            self._next_ui_refresh = self.world.elapsed + UI_REFRESH_INTERVAL
        if self.show_help != self._prev_show_help:
            self.renderer.clear()
            self._prev_show_help = self.show_help

        width, height = self.renderer.size()
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            canvas = hud.too_small(width, height)
        else:
            canvas = hud.compose(self, width, height, self.status_line())
        self.renderer.draw_grid(*canvas.grids())

    def _frame(self, last: float) -> float:
        start = time.perf_counter()
        for key in self.renderer.read_keys():
            self.handle_key(key)
        self.update(start - last)
        self.render()
        self.last_tick_ms = (time.perf_counter() - start) * 1000
        self.current_fps = 1 / max(1e-6, start - last)
        sleep = max(0, (1 / self.tick_rate) - (time.perf_counter() - start))
        time.sleep(sleep)
        return start

    def run(self, show_fps: bool = False) -> None:
        """Run the main loop until quit."""
        from .renderer import Renderer

        self.running = True
        self.show_fps = show_fps
        if self.renderer is None:
            self.renderer = Renderer()
        term = self.renderer.term
        if self.renderer.use_curses:
            import curses

            curses.cbreak()
            curses.noecho()
            term.nodelay(True)
            try:
                last = time.perf_counter()
                while self.running:
                    last = self._frame(last)
            finally:
                term.nodelay(False)
                curses.nocbreak()
                curses.echo()
                curses.endwin()
        else:
            with term.fullscreen(), term.cbreak(), term.hidden_cursor():
                last = time.perf_counter()
                while self.running:
                    last = self._frame(last)
