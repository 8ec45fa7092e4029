"""Bet placement."""

from arenamarkets.betting.placement import (
    PLACEMENT_UNAVAILABLE,
    BetPlacer,
    PlaceBetResult,
    PlaceBetState,
)

__all__ = ["BetPlacer", "PlaceBetResult", "PlaceBetState", "PLACEMENT_UNAVAILABLE"]
