from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Alt",
    base_cost=170_000_000_000_000,
    base_lps=430_000_000.0,
    hotkey="[",
)
