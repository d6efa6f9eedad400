from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Neural Matrix",
    base_cost=14_000_000_000_000,
    base_lps=65_000_000.0,
    hotkey="=",
)
