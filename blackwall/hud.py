"""Screen composition for the three-panel layout."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from .constants import (
    BUY_BUFF_KEY,
    BUY_CLICK_SHARE_KEY,
    CATCH_CACHE_KEY,
    HEADER_HEIGHT,
    MIN_HEIGHT,
    MIN_WIDTH,
    Color,
)

if TYPE_CHECKING:  # pragma: no cover - imports for type hints only
    from .game import Game

SUFFIXES = ["", "K", "M", "B", "T", "Qa", "Qi", "Sx", "Sp", "Oc", "No", "Dc"]

HELP_LINES = [
    "Controls:",
    "space - breach",
    "b - buy overclock",
    "c - buy click share",
    "1-9 0 - = [ - buy quickhack",
    "g - intercept cache",
    "s - save  l - load",
    "h - toggle help",
    "q / esc - quit",
]


def format_number(num: float) -> str:
    """Format ``num`` with two decimals and a magnitude suffix."""
    if num < 1000.0:
        return f"{num:.2f}"
    index = 0
    while num >= 1000.0 and index < len(SUFFIXES) - 1:
        num /= 1000.0
        index += 1
    return f"{num:.2f}{SUFFIXES[index]}"


class Canvas:
    """Glyph and colour grids matching ``Renderer.draw_grid``."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.glyphs: List[List[str]] = [[" "] * width for _ in range(height)]
        self.colors: List[List[Optional[Color]]] = [
            [None] * width for _ in range(height)
        ]

    def put(self, x: int, y: int, text: str, color: Color | None = None) -> None:
        """Write ``text`` at ``(x, y)``, clipped to the canvas."""
        if not 0 <= y < self.height:
            return
        for offset, ch in enumerate(text):
            cx = x + offset
            if 0 <= cx < self.width:
                self.glyphs[y][cx] = ch
                self.colors[y][cx] = color

    def box(
        self, x: int, y: int, width: int, height: int, title: str | None = None
    ) -> None:
        """Draw an ASCII border with an optional title on the top edge."""
        if width < 2 or height < 2:
            return
        self.put(x, y, "+" + "-" * (width - 2) + "+")
        for row in range(y + 1, y + height - 1):
            self.put(x, row, "|")
            self.put(x + width - 1, row, "|")
        self.put(x, y + height - 1, "+" + "-" * (width - 2) + "+")
        if title:
            self.put(x + 2, y, title, Color.TITLE)

    def grids(self) -> Tuple[List[List[str]], List[List[Optional[Color]]]]:
        return self.glyphs, self.colors


def _cost_color(game: "Game", cost: float) -> Color:
    return Color.AFFORDABLE if game.lines >= cost else Color.UNAFFORDABLE


def _draw_header(game: "Game", canvas: Canvas) -> None:
    canvas.box(0, 0, canvas.width, HEADER_HEIGHT)
    if game.feedback_timer > 0:
        canvas.put(
            2,
            1,
            f"+++ BREACHED FOR: {format_number(game.last_click_value)} DATA +++",
            Color.FEEDBACK,
        )
    if game.autosave_feedback_timer > 0:
        canvas.put(canvas.width - 30, 1, "[ SYSTEM: PROGRESS SAVED ]", Color.NOTICE)
    if game.cache.available:
        canvas.put(
            2,
            2,
            " [!] ANOMALOUS SIGNAL DETECTED - PRESS "
            f"'{CATCH_CACHE_KEY}' TO INTERCEPT [!] ",
            Color.ALERT,
        )


def _draw_stats(game: "Game", canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    canvas.box(x, y, w, h, " [ TERMINAL ] ")
    left = x + 2
    canvas.put(left, y + 2, "TARGET: BlackWall")
    canvas.put(left, y + 3, " PRESS SPACE TO BREACH ", Color.HIGHLIGHT)
    canvas.put(left, y + 5, f"DATA BANK:       {format_number(game.lines)}")
    canvas.put(
        left, y + 6, f"DATA PER SEC:    {format_number(game.data_per_second)}"
    )
    if game.cache_buff_timer > 0:
        canvas.put(
            left,
            y + 7,
            f"{game.active_alert} ({game.cache_buff_timer:.1f}s)"[: w - 4],
            Color.NOTICE,
        )

    buff_cost = game.buff_cost()
    canvas.put(
        left,
        y + 9,
        f"[{BUY_BUFF_KEY.upper()}] Overclock Multiplier: x{game.buffs:.2f}",
    )
    canvas.put(
        left + 4,
        y + 10,
        f"Cost: {format_number(buff_cost)} DATA",
        _cost_color(game, buff_cost),
    )
    share_cost = game.click_share_cost()
    canvas.put(
        left,
        y + 12,
        f"[{BUY_CLICK_SHARE_KEY.upper()}] Breach DATA/SEC share: "
        f"{game.lps_to_click * 100:.0f}%",
    )
    canvas.put(
        left + 4,
        y + 13,
        f"Cost: {format_number(share_cost)} DATA",
        _cost_color(game, share_cost),
    )

    row = y + 15
    if game.event_log:
        canvas.put(left, row, "LOG", Color.TITLE)
        for idx, text in enumerate(game.event_log):
            canvas.put(left, row + 1 + idx, text[: w - 4])
        row += len(game.event_log) + 2
    if game.show_help:
        for idx, text in enumerate(HELP_LINES):
            if row + idx >= y + h - 1:
                break
            canvas.put(left, row + idx, text[: w - 4])
    else:
        canvas.put(left, y + h - 2, "[H] help")


def _draw_shop(game: "Game", canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    canvas.box(x, y, w, h, " [ BLACK MARKET ] ")
    left = x + 2
    canvas.put(left, y + 2, "QUICKHACKS", Color.FEEDBACK)
    canvas.put(left, y + 3, "-" * max(0, min(42, w - 4)), Color.FEEDBACK)
    for idx, building in enumerate(game.buildings):
        row = y + 5 + idx * 2
        if row + 1 >= y + h - 1:
            break
        bp = building.blueprint
        line = f"[{bp.hotkey}] {bp.name:<10} (Owned: {building.count})"
        canvas.put(left, row, line[: w - 4])
        canvas.put(left + 4, row + 1, f"+{format_number(bp.base_lps)} D/s  |")
        cost = building.next_cost()
        canvas.put(
            left + 20, row + 1, f" Cost: {format_number(cost)}", _cost_color(game, cost)
        )


def compose(game: "Game", width: int, height: int, status: str = "") -> Canvas:
    """Lay out header, stats panel, shop panel and status line."""
    canvas = Canvas(width, height)
    _draw_header(game, canvas)
    panel_h = height - HEADER_HEIGHT - 1
    half = width // 2
    _draw_stats(game, canvas, 0, HEADER_HEIGHT, half, panel_h)
    _draw_shop(game, canvas, half, HEADER_HEIGHT, width - half, panel_h)
    canvas.put(0, height - 1, status[:width], Color.UI)
    return canvas


def too_small(width: int, height: int) -> Canvas:
    """Placeholder frame for a terminal smaller than the layout."""
    canvas = Canvas(width, height)
    message = (
        f"TERMINAL TOO SMALL: need {MIN_WIDTH}x{MIN_HEIGHT}, have {width}x{height}"
    )
    canvas.put(0, height // 2, message[:width], Color.ALERT)
    return canvas
