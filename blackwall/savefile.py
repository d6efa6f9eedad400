"""Plaintext save files.

A save is one value per line, the format version first::

    version
    lines
    buffs
    lines_per_second
    buffs_bought
    click_shares_bought
    lps_to_click
    <owned count of each source, cheapest source first>

Saves written by another version are ignored rather than migrated.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, List

from .constants import SAVE_VERSION

if TYPE_CHECKING:  # pragma: no cover - imports for type hints only
    from .game import Game

logger = logging.getLogger(__name__)


class SaveFormatError(ValueError):
    """Raised when a save file cannot be parsed."""


def dump_lines(game: "Game") -> List[str]:
    """Serialise ``game`` into the save file's lines."""
    lines = [
        str(SAVE_VERSION),
        repr(game.lines),
        repr(game.buffs),
        repr(game.lines_per_second),
        str(game.buffs_bought),
        str(game.click_shares_bought),
        repr(game.lps_to_click),
    ]
    lines.extend(str(b.count) for b in game.buildings)
    return lines


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise SaveFormatError(f"negative count {value}")
    return value


def _amount(text: str) -> float:
    value = float(text)
    if not math.isfinite(value) or value < 0:
        raise SaveFormatError(f"invalid amount {text!r}")
    return value


def parse_lines(rows: List[str], num_buildings: int) -> dict:
    """Parse save rows into a field dictionary.

    Raises ``SaveFormatError`` on a version mismatch or malformed data.
    """
    rows = [r.strip() for r in rows if r.strip()]
    if not rows:
        raise SaveFormatError("empty save file")
    try:
        version = int(rows[0])
    except ValueError as exc:
        raise SaveFormatError(f"bad version tag {rows[0]!r}") from exc
    if version != SAVE_VERSION:
        raise SaveFormatError(f"save version {version} != {SAVE_VERSION}")

    expected = 7 + num_buildings
    if len(rows) < expected:
        raise SaveFormatError(f"expected {expected} fields, found {len(rows)}")

    try:
        return {
            "lines": _amount(rows[1]),
            "buffs": _amount(rows[2]),
            "lines_per_second": _amount(rows[3]),
            "buffs_bought": _count(rows[4]),
            "click_shares_bought": _count(rows[5]),
            "lps_to_click": _amount(rows[6]),
            "counts": [_count(r) for r in rows[7:expected]],
        }
    except SaveFormatError:
        raise
    except ValueError as exc:
        raise SaveFormatError(str(exc)) from exc


def save_game(game: "Game", path: str | Path) -> bool:
    """Write ``game`` to ``path``. Returns ``False`` if the write failed."""
    path = Path(path)
    try:
        path.write_text("\n".join(dump_lines(game)) + "\n")
    except OSError as exc:
        logger.warning("could not write save %s: %s", path, exc)
        return False
    logger.info("saved progress to %s", path)
    return True


def load_game(game: "Game", path: str | Path) -> bool:
    """Restore ``game`` from ``path``.

    The game is left untouched unless the whole file parses.
    """
    path = Path(path)
    try:
        rows = path.read_text().splitlines()
    except FileNotFoundError:
        logger.debug("no save file at %s", path)
        return False
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read save %s: %s", path, exc)
        return False

    try:
        data = parse_lines(rows, len(game.buildings))
    except SaveFormatError as exc:
        logger.warning("ignoring save %s: %s", path, exc)
        return False

    game.lines = data["lines"]
    game.buffs = data["buffs"]
    game.buffs_bought = data["buffs_bought"]
    game.click_shares_bought = data["click_shares_bought"]
    game.lps_to_click = data["lps_to_click"]
    for building, count in zip(game.buildings, data["counts"]):
        building.count = count
    # The stored rate is informational; counts are authoritative.
    game.update_lps()
    logger.info("loaded progress from %s", path)
    return True
