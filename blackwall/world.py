from __future__ import annotations


class World:
    """Simple container for session time."""

    def __init__(self, tick_rate: int) -> None:
        self.tick_rate = tick_rate
        self.tick_count = 0
        self.elapsed = 0.0

    def tick(self, dt: float) -> None:
        """Advance session time by ``dt`` seconds (one frame)."""
        self.tick_count += 1
        self.elapsed += max(0.0, dt)

    @property
    def uptime(self) -> str:
        """Return the session length as ``HH:MM:SS``."""
        total = int(self.elapsed)
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
