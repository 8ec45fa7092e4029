"""Bet placement - currently disabled; every attempt is rejected."""

from __future__ import annotations

from enum import StrEnum

import structlog
from pydantic import BaseModel

log = structlog.get_logger(__name__)

PLACEMENT_UNAVAILABLE = "Bet placement is currently unavailable"


class PlaceBetState(StrEnum):
    IDLE = "idle"
    PLACING_BET = "placing-bet"
    CONFIRMING = "confirming"
    UPLOADING_JSON = "uploading-json"
    SUCCESS = "success"
    ERROR = "error"


class PlaceBetResult(BaseModel):
    """Outcome of a placement attempt. tx_hash and bet_id are set only on success."""

    state: PlaceBetState
    tx_hash: str | None = None
    bet_id: int | None = None
    error: str | None = None


class BetPlacer:
    """Placement entry point. Disabled: reports unavailability for every attempt."""

    async def place_bet(self, portfolio_json: str, amount: int) -> PlaceBetResult:
        log.warning("bet_placement_rejected", amount=amount, reason="unavailable")
        return PlaceBetResult(state=PlaceBetState.ERROR, error=PLACEMENT_UNAVAILABLE)

    def reset(self) -> None:
        """No-op; there is no placement state to clear."""
        return None
