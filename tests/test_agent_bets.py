"""Agent bets feed: backend fetch and deterministic fallback."""

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from arenamarkets.ingestion import fetch_agent_bets, generate_mock_agent_bets
from arenamarkets.models import AgentBet, AgentBetsResponse

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
WALLET = "0x1234567890abcdef1234567890abcdef12345678"


def _fetch(handler, wallet=WALLET, limit=5):
    async def go():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://backend.test") as client:
            return await fetch_agent_bets(wallet, limit, client=client)

    return asyncio.run(go())


def test_mock_is_deterministic():
    a = generate_mock_agent_bets(WALLET, 10, now=NOW)
    b = generate_mock_agent_bets(WALLET, 10, now=NOW)
    assert a == b
    assert len(a.bets) == 10


def test_mock_first_bet_values():
    # "0x" -> code point sum 168 -> seed 0.168 -> pending
    resp = generate_mock_agent_bets("0x", 1, now=NOW)
    bet = resp.bets[0]
    assert bet.bet_id == "0x000000a8"
    assert bet.status == "pending"
    assert bet.outcome is None
    assert bet.amount == 125
    assert bet.result == 0
    assert bet.created_at == "2026-01-01T08:00:00.000Z"
    assert resp.total == 218


def test_mock_settled_bet():
    # "zzzzzz" -> sum 732 -> seed 0.732 -> settled
    resp = generate_mock_agent_bets("zzzzzz", 1, now=NOW)
    bet = resp.bets[0]
    assert bet.bet_id == "0x000002dczzzz"
    assert bet.status == "settled"
    assert bet.outcome == "lost"
    assert bet.amount == 379
    assert bet.result == -156
    assert resp.total == 182


def test_mock_invariants():
    resp = generate_mock_agent_bets(WALLET, 50, now=NOW)
    for bet in resp.bets:
        assert 50 <= bet.amount <= 500
        assert 5000 <= bet.portfolio_size <= 25000
        if bet.status == "settled":
            assert bet.outcome in ("won", "lost")
            assert bet.result != 0
        else:
            assert bet.outcome is None
            assert bet.result == 0
        assert bet.bet_id.endswith(WALLET[2:10])
    assert 50 <= resp.total < 250


def test_mock_zero_limit():
    assert generate_mock_agent_bets(WALLET, 0).bets == []


def test_fetch_parses_backend_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["limit"] = request.url.params.get("limit")
        return httpx.Response(
            200,
            json={
                "bets": [
                    {
                        "betId": "42",
                        "portfolioSize": 12000,
                        "amount": 100,
                        "result": 35.5,
                        "status": "settled",
                        "outcome": "won",
                        "createdAt": "2026-01-01T00:00:00.000Z",
                    }
                ],
                "total": 7,
            },
        )

    resp = _fetch(handler, limit=5)
    assert seen == {"path": f"/api/agents/{WALLET}/bets", "limit": "5"}
    assert resp.total == 7
    assert resp.bets[0].bet_id == "42"
    assert resp.bets[0].outcome == "won"
    assert resp.bets[0].result == 35.5


def test_fetch_falls_back_on_error_status():
    resp = _fetch(lambda request: httpx.Response(503), limit=3)
    expected = generate_mock_agent_bets(WALLET, 3)
    assert [b.bet_id for b in resp.bets] == [b.bet_id for b in expected.bets]
    assert resp.total == expected.total


def test_fetch_falls_back_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    resp = _fetch(handler)
    assert len(resp.bets) == 5
    assert resp.total == generate_mock_agent_bets(WALLET, 5).total


def test_fetch_falls_back_on_invalid_json():
    resp = _fetch(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
    assert len(resp.bets) == 5


def test_fetch_falls_back_on_invalid_payload():
    payload = {
        "bets": [
            {
                "betId": "1",
                "portfolioSize": 1,
                "amount": 1,
                "result": 0,
                "status": "pending",
                "outcome": "won",
                "createdAt": "2026-01-01T00:00:00.000Z",
            }
        ],
        "total": 1,
    }
    resp = _fetch(lambda request: httpx.Response(200, json=payload), limit=2)
    assert len(resp.bets) == 2
    assert resp.total == generate_mock_agent_bets(WALLET, 2).total


def test_fetch_without_backend_uses_mock():
    resp = asyncio.run(fetch_agent_bets(WALLET, 4, base_url=""))
    assert len(resp.bets) == 4


def test_outcome_requires_settled_status():
    with pytest.raises(ValueError):
        AgentBet(
            bet_id="1",
            portfolio_size=1,
            amount=1,
            status="matched",
            outcome="lost",
            created_at="2026-01-01T00:00:00.000Z",
        )


def test_response_serializes_camel_case():
    resp = AgentBetsResponse(bets=generate_mock_agent_bets(WALLET, 1, now=NOW).bets, total=1)
    dumped = resp.model_dump(by_alias=True)
    assert set(dumped["bets"][0]) == {
        "betId",
        "portfolioSize",
        "amount",
        "result",
        "status",
        "outcome",
        "createdAt",
    }


def test_fetch_falls_back_on_unbuildable_url():
    # Control characters make the request URL invalid before anything is sent
    resp = asyncio.run(fetch_agent_bets("0xab\ncd", 2, base_url="http://backend.test"))
    assert len(resp.bets) == 2
    assert resp.total == generate_mock_agent_bets("0xab\ncd", 2).total
