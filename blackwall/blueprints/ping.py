from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Ping",
    base_cost=15,
    base_lps=0.1,
    hotkey="1",
)
