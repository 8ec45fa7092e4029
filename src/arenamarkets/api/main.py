"""FastAPI backend exposing the market ID codec and agent bet feeds."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from arenamarkets.api.schemas import (
    EncodeMarketIdRequest,
    EncodeMarketIdResponse,
    ErrorResponse,
    HealthResponse,
    MarketIdResponse,
    PlaceBetRequest,
    PositionLabelResponse,
)
from arenamarkets.betting import BetPlacer
from arenamarkets.codec import (
    encode_market_id,
    format_position,
    get_market_url,
    get_outcome_labels,
    get_resolution_badge,
    get_source_badge,
    parse_market_id,
)
from arenamarkets.config import get_settings
from arenamarkets.ingestion import fetch_agent_bets
from arenamarkets.models import AgentBetsResponse

# Set by run_api() so request handlers read the same config as the CLI.
_config_profile: str | None = None
_config_dir: Path | None = None

app = FastAPI(title="Arena Markets API", version="0.1.0")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

_placer = BetPlacer()


def _error_json(code: str, message: str, status_code: int = 404) -> JSONResponse:
    """Return consistent error JSON: { detail, code }."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@app.get("/api/market-ids/{market_id:path}", response_model=MarketIdResponse)
def describe_market_id(market_id: str) -> MarketIdResponse:
    """Parse a market ID (legacy or encoded) and attach its display metadata."""
    parsed = parse_market_id(market_id)
    return MarketIdResponse(
        **parsed.model_dump(),
        market_url=get_market_url(parsed),
        source_badge=get_source_badge(parsed.data_source),
        resolution_badge=get_resolution_badge(parsed.resolution_method),
        outcome_labels=list(get_outcome_labels(parsed.data_source)),
    )


@app.post("/api/market-ids/encode", response_model=EncodeMarketIdResponse)
def encode(body: EncodeMarketIdRequest) -> EncodeMarketIdResponse:
    return EncodeMarketIdResponse(
        market_id=encode_market_id(body.data_source, body.resolution_method, body.raw_id)
    )


@app.get("/api/positions/label", response_model=PositionLabelResponse)
def position_label(
    market_id: str = Query(..., description="Market ID the position belongs to"),
    position: str = Query(..., description="Position indicator; 1 is the positive side"),
) -> PositionLabelResponse:
    parsed = parse_market_id(market_id)
    return PositionLabelResponse(
        market_id=parsed.full_encoded,
        position=position,
        label=format_position(position, parsed.data_source),
    )


@app.get("/api/agents/{wallet_address}/bets", response_model=AgentBetsResponse)
async def agent_bets(
    wallet_address: str,
    limit: int = Query(10, ge=1, le=100),
) -> AgentBetsResponse:
    """Recent bets for an agent wallet; synthetic data when the backend is unavailable."""
    settings = get_settings(_config_profile, _config_dir)
    return await fetch_agent_bets(
        wallet_address,
        limit,
        base_url=settings.backend_url,
        timeout=settings.request_timeout_sec,
    )


@app.post(
    "/api/bets",
    responses={503: {"model": ErrorResponse}},
)
async def place_bet(body: PlaceBetRequest) -> JSONResponse:
    result = await _placer.place_bet(body.portfolio_json, body.amount)
    if result.error:
        return _error_json("bet_placement_unavailable", result.error, status_code=503)
    return JSONResponse(content=result.model_dump(mode="json"))


def run_api(
    host: str = "127.0.0.1",
    port: int = 8000,
    profile: str | None = None,
    config_dir: Path | None = None,
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    global _config_profile, _config_dir
    _config_profile = profile
    _config_dir = config_dir
    uvicorn.run(app, host=host, port=port)
