from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Daemon",
    base_cost=130_000,
    base_lps=260.0,
    hotkey="5",
)
