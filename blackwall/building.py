from __future__ import annotations

from dataclasses import dataclass

from .constants import COST_SCALE_FACTOR


@dataclass
class BuildingBlueprint:
    """Template for a production source sold in the shop."""

    name: str
    base_cost: float
    base_lps: float
    # Key that buys one unit from the shop
    hotkey: str


@dataclass
class Building:
    """Owned instance of a production source."""

    blueprint: BuildingBlueprint
    count: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"negative count for {self.blueprint.name}: {self.count}")

    # ---------------------------------------------------------------
    @property
    def name(self) -> str:
        return self.blueprint.name

    def next_cost(self) -> float:
        """Return the price of the next unit."""
        return self.blueprint.base_cost * COST_SCALE_FACTOR ** self.count

    def lines_per_second(self) -> float:
        """Passive DATA/s contributed by every owned unit."""
        return self.blueprint.base_lps * self.count
