from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="Bartmoss' Cyberdeck",
    base_cost=5_100_000_000,
    base_lps=260_000.0,
    hotkey="9",
)
