from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Grouped Subnet Breach",
    base_cost=12_000,
    base_lps=47.0,
    hotkey="4",
)
