"""Canonical schema (Pydantic) - market identifiers, badges, agent bets."""

from arenamarkets.models.bet import AgentBet, AgentBetsResponse, BetOutcome, BetStatus
from arenamarkets.models.market_id import Badge, DataSource, ParsedMarketId, ResolutionMethod

__all__ = [
    "DataSource",
    "ResolutionMethod",
    "ParsedMarketId",
    "Badge",
    "AgentBet",
    "AgentBetsResponse",
    "BetStatus",
    "BetOutcome",
]
