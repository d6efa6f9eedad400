from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Project Oracle",
    base_cost=75_000_000_000,
    base_lps=1_600_000.0,
    hotkey="0",
)
