from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Coprocessor",
    base_cost=1_100,
    base_lps=8.0,
    hotkey="3",
)
