from __future__ import annotations

from ..building import BuildingBlueprint

BLUEPRINT = BuildingBlueprint(
    name="L.I.L.I.T.H.",
    base_cost=330_000_000,
    base_lps=44_000.0,
    hotkey="8",
)
