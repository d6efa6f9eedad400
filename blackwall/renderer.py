from __future__ import annotations

import sys
import time
import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import Color, MIN_HEIGHT, MIN_WIDTH, UI_COLOR_RGB

logger = logging.getLogger(__name__)

try:
    from blessed import Terminal

    _HAS_BLESSED = True
except Exception:  # pragma: no cover - fallback if blessed is missing
    import curses

    _HAS_BLESSED = False


def _segments(
    row: list[str], color_row: list[Optional[Color]]
) -> Iterator[Tuple[str, Optional[Color]]]:
    """Split a row into runs of text sharing one colour."""
    start = 0
    current_color = color_row[0] if color_row else None
    for x, color in enumerate(color_row):
        if color != current_color:
            yield "".join(row[start:x]), current_color
            start = x
            current_color = color
    yield "".join(row[start:]), current_color


class Renderer:
    """Basic terminal renderer using blessed with a curses fallback."""

    UI_RGB = UI_COLOR_RGB
    COLOR_ATTRS = {
        Color.TITLE: "bold_cyan",
        Color.AFFORDABLE: "green",
        Color.UNAFFORDABLE: "red",
        Color.FEEDBACK: "bold",
        Color.NOTICE: "bold_green",
        Color.ALERT: "bold_blink_cyan",
        Color.HIGHLIGHT: "reverse",
    }

    def __init__(self) -> None:
        self._curses_attrs: Dict[Color, int] = {}
        if _HAS_BLESSED:
            self.term = Terminal()
            if not self.term.does_styling:
                # Some environments mis-report TTY capabilities, which turns
                # ``does_styling`` off even though ANSI colours work.
                self.term = Terminal(force_styling=True)
            self.use_curses = False
        else:
            self.term = curses.initscr()
            self.use_curses = True
            self._curses_attrs = self._init_curses_colors()

        # Previously rendered frame so only changed rows are redrawn.
        self._last_glyphs: list[list[str]] | None = None
        self._last_colors: list[list[object | None]] | None = None
        self._last_size: tuple[int, int] = (0, 0)

    @staticmethod
    def _init_curses_colors() -> Dict[Color, int]:
        """Map logical colours to curses attributes, pairs where supported."""
        import curses

        attrs = {
            Color.FEEDBACK: curses.A_BOLD,
            Color.HIGHLIGHT: curses.A_REVERSE,
        }
        if not curses.has_colors():
            return attrs
        curses.start_color()
        curses.use_default_colors()
        pairs = {
            Color.AFFORDABLE: (1, curses.COLOR_GREEN, 0),
            Color.UNAFFORDABLE: (2, curses.COLOR_RED, 0),
            Color.TITLE: (3, curses.COLOR_CYAN, curses.A_BOLD),
            Color.NOTICE: (1, curses.COLOR_GREEN, curses.A_BOLD),
            Color.ALERT: (3, curses.COLOR_CYAN, curses.A_BOLD | curses.A_BLINK),
        }
        for color, (pair, fg, extra) in pairs.items():
            curses.init_pair(pair, fg, -1)
            attrs[color] = curses.color_pair(pair) | extra
        return attrs

    # ------------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        """Return the terminal's ``(width, height)``.

        Falls back to the layout minimum when the terminal reports nothing.
        """
        if self.use_curses:
            height, width = self.term.getmaxyx()
        else:
            width, height = self.term.width, self.term.height
        return width or MIN_WIDTH, height or MIN_HEIGHT

    def read_keys(self) -> List[object]:
        """Drain every key press waiting on the input buffer."""
        keys: List[object] = []
        if self.use_curses:
            while True:
                ch = self.term.getch()
                if ch == -1:
                    break
                keys.append(ch)
        else:
            while True:
                key = self.term.inkey(timeout=0)
                if not key:
                    break
                keys.append(key)
        return keys

    def clear(self) -> None:
        if self.use_curses:
            self.term.clear()
            self.term.refresh()
        else:
            sys.stdout.write(self.term.clear())
            sys.stdout.flush()
        # Reset diff tracking since the screen is now blank
        self._last_glyphs = None
        self._last_colors = None

    def draw_grid(
        self,
        glyphs: list[list[str]],
        colors: list[list[Optional[Color]]] | None = None,
    ) -> None:
        start_total = time.perf_counter()
        if colors is None:
            colors = [[None for _ in row] for row in glyphs]

        height = len(glyphs)
        width = len(glyphs[0]) if height else 0

        size = (width, height)
        full_redraw = size != self._last_size or self._last_glyphs is None
        if full_redraw:
            # The terminal was resized, so wipe it and redraw everything.
            self.clear()
            self._last_size = size

        def unchanged(y: int) -> bool:
            return (
                not full_redraw
                and self._last_glyphs is not None
                and glyphs[y] == self._last_glyphs[y]
                and colors[y] == self._last_colors[y]
            )

        if self.use_curses:
            import curses

            for y, row in enumerate(glyphs):
                if unchanged(y):
                    continue
                x = 0
                for text, color in _segments(row, colors[y]):
                    try:
                        attr = self._curses_attrs.get(color, 0)
                        self.term.addstr(y, x, text, attr)
                    except curses.error:
                        # Writing the bottom-right cell moves the cursor off screen.
                        pass
                    x += len(text)
            self.term.refresh()
        else:

            def apply_color(text: str, color: object | None) -> str:
                if color is None:
                    return text
                if color is Color.UI:
                    if hasattr(self.term, "color_rgb"):
                        prefix = self.term.color_rgb(*self.UI_RGB)
                        return prefix + text + self.term.normal
                    return text
                attr = self.COLOR_ATTRS.get(color)
                if attr and hasattr(self.term, attr):
                    return getattr(self.term, attr)(text)
                return text

            out: list[str] = []
            for y, row in enumerate(glyphs):
                if unchanged(y):
                    continue
                segments = [
                    apply_color(text, color)
                    for text, color in _segments(row, colors[y])
                ]
                out.append(self.term.move_xy(0, y) + "".join(segments))

            sys.stdout.write("".join(out))
            sys.stdout.flush()

        # Store frame for diffing next draw
        self._last_glyphs = [row.copy() for row in glyphs]
        self._last_colors = [row.copy() for row in colors]
        logger.debug(
            "draw_grid took %.2f ms (full redraw: %s)",
            (time.perf_counter() - start_total) * 1000,
            full_redraw,
        )
