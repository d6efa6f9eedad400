from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Neural Link",
    base_cost=100,
    base_lps=1.0,
    hotkey="2",
)
