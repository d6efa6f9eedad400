from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Deep Dive Port",
    base_cost=1_400_000,
    base_lps=1_400.0,
    hotkey="6",
)
