from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Cynosure Datacore",
    base_cost=1_000_000_000_000,
    base_lps=1_000_000.0,
    hotkey="-",
)
