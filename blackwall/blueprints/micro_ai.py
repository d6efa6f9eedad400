from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Micro-AI",
    base_cost=20_000_000,
    base_lps=7_800.0,
    hotkey="7",
)
