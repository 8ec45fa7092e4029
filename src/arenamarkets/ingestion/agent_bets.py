"""Agent bets feed - backend fetch with deterministic mock fallback."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import httpx
import structlog
from pydantic import ValidationError

from arenamarkets.models import AgentBet, AgentBetsResponse

log = structlog.get_logger(__name__)

AGENT_BETS_PATH = "/api/agents/{wallet_address}/bets"

_STATUSES = ("pending", "matched", "settled")
_OUTCOMES = ("won", "lost")


def _iso_ms(ts: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and trailing Z."""
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def generate_mock_agent_bets(
    wallet_address: str,
    limit: int = 10,
    now: datetime | None = None,
) -> AgentBetsResponse:
    """Deterministic synthetic bets for a wallet. Same input gives the same output."""
    now = now or datetime.now(timezone.utc)
    h = sum(ord(c) for c in wallet_address)
    bets = []
    for i in range(max(limit, 0)):
        seed = ((h + i * 137) % 1000) / 1000
        status = _STATUSES[math.floor(seed * 3)]
        outcome = _OUTCOMES[math.floor(seed * 2)] if status == "settled" else None
        amount = math.floor(50 + seed * 450)  # $50-$500
        if outcome is None:
            result = 0
        else:
            pnl = math.floor(10 + seed * 200)
            result = pnl if outcome == "won" else -pnl
        age = timedelta(hours=(i + 1) * (1 + math.floor(seed * 23)))
        bets.append(
            AgentBet(
                bet_id=f"0x{h + i:08x}{wallet_address[2:10]}",
                portfolio_size=math.floor(5000 + seed * 20000),
                amount=amount,
                result=result,
                status=status,
                outcome=outcome,
                created_at=_iso_ms(now - age),
            )
        )
    return AgentBetsResponse(bets=bets, total=math.floor(50 + h % 200))


async def fetch_agent_bets(
    wallet_address: str,
    limit: int = 10,
    *,
    base_url: str | None = None,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> AgentBetsResponse:
    """Fetch an agent's recent bets from the backend.

    Never raises for upstream problems: a missing backend URL, a non-2xx
    response, a transport error or a malformed payload all yield the mock
    dataset for the wallet instead.
    """
    if not base_url and client is None:
        log.debug("agent_bets_backend_not_configured", wallet=wallet_address)
        return generate_mock_agent_bets(wallet_address, limit)

    url = (base_url or "").rstrip("/") + AGENT_BETS_PATH.format(wallet_address=wallet_address)
    try:
        if client is not None:
            resp = await client.get(url, params={"limit": limit})
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, params={"limit": limit})
        if not resp.is_success:
            log.warning("agent_bets_fallback", wallet=wallet_address, status_code=resp.status_code)
            return generate_mock_agent_bets(wallet_address, limit)
        return AgentBetsResponse.model_validate(resp.json())
    except (httpx.HTTPError, httpx.InvalidURL, ValidationError, ValueError) as e:
        log.warning("agent_bets_fallback", wallet=wallet_address, error=str(e))
        return generate_mock_agent_bets(wallet_address, limit)
