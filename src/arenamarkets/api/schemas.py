"""Pydantic schemas for API request/response consistency and OpenAPI docs."""

from __future__ import annotations

from pydantic import BaseModel, Field

from arenamarkets.models import Badge, DataSource, ResolutionMethod


# --- Health ---
class HealthResponse(BaseModel):
    status: str = "ok"


# --- Error (consistent shape for 4xx/5xx) ---
class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Human-readable message")
    code: str | None = Field(None, description="Machine-readable code, e.g. bet_placement_unavailable")


# --- Market IDs ---
class MarketIdResponse(BaseModel):
    data_source: DataSource
    resolution_method: ResolutionMethod
    raw_id: str
    full_encoded: str
    market_url: str
    source_badge: Badge
    resolution_badge: Badge
    outcome_labels: list[str] = Field(..., description="[positive, negative] outcome labels")


class EncodeMarketIdRequest(BaseModel):
    data_source: DataSource
    resolution_method: ResolutionMethod
    raw_id: str


class EncodeMarketIdResponse(BaseModel):
    market_id: str


class PositionLabelResponse(BaseModel):
    market_id: str
    position: str
    label: str


# --- Bets ---
class PlaceBetRequest(BaseModel):
    portfolio_json: str
    amount: int = Field(..., description="USDC base units")
