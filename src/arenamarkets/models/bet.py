"""AgentBet, AgentBetsResponse - recent bets placed by an agent wallet."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

BetStatus = Literal["pending", "matched", "settled"]
BetOutcome = Literal["won", "lost"]


class AgentBet(BaseModel):
    """Single bet in an agent's recent bets table. Wire format is camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bet_id: str
    portfolio_size: int = Field(..., ge=0, description="Number of markets in the portfolio")
    amount: float = Field(..., ge=0, description="USDC wagered")
    result: float = 0.0  # signed P&L
    status: BetStatus
    outcome: BetOutcome | None = None  # only when settled
    created_at: str  # ISO timestamp

    @model_validator(mode="after")
    def _outcome_only_when_settled(self) -> AgentBet:
        if self.outcome is not None and self.status != "settled":
            raise ValueError(f"outcome {self.outcome!r} set on {self.status} bet")
        return self


class AgentBetsResponse(BaseModel):
    """Page of agent bets plus the agent's total bet count."""

    bets: list[AgentBet] = Field(default_factory=list)
    total: int = Field(0, ge=0)
