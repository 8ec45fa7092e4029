"""CLI commands via Typer's test runner."""

import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from arenamarkets.cli import api_cmd
from arenamarkets.cli import app as cli_app
from arenamarkets.config import Settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    monkeypatch.setattr(cli_app, "get_settings", lambda profile=None, config_dir=None: Settings())
    monkeypatch.setattr(cli_app, "configure_logging", lambda settings: None)
    # Keep debug events out of command output
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


def test_parse_legacy_id():
    result = runner.invoke(cli_app.app, ["ids", "parse", "0x1234"])
    assert result.exit_code == 0
    assert "polymarket (Polymarket)" in result.output
    assert "polymarket:keeper:0x1234" in result.output
    assert "https://polymarket.com/event/0x1234" in result.output


def test_parse_json():
    result = runner.invoke(cli_app.app, ["ids", "parse", "--json", "coingecko:deterministic:bitcoin"])
    assert result.exit_code == 0
    out = json.loads(result.output)
    assert out["data_source"] == "coingecko"
    assert out["raw_id"] == "bitcoin"
    assert out["source_badge"]["label"] == "CoinGecko"


def test_encode():
    result = runner.invoke(cli_app.app, ["ids", "encode", "coingecko", "deterministic", "bitcoin"])
    assert result.exit_code == 0
    assert result.output.strip() == "coingecko:deterministic:bitcoin"


def test_encode_rejects_unknown_source():
    result = runner.invoke(cli_app.app, ["ids", "encode", "kalshi", "keeper", "x"])
    assert result.exit_code != 0


def test_url():
    result = runner.invoke(cli_app.app, ["ids", "url", "polymarket:keeper:0xabc:def"])
    assert result.output.strip() == "https://polymarket.com/event/0xabc:def"


def test_position():
    assert runner.invoke(cli_app.app, ["ids", "position", "1"]).output.strip() == "YES"
    result = runner.invoke(cli_app.app, ["ids", "position", "0", "--source", "coingecko"])
    assert result.output.strip() == "SHORT"
    result = runner.invoke(cli_app.app, ["ids", "position", "1", "--market", "coingecko:deterministic:eth"])
    assert result.output.strip() == "LONG"


def test_agent_bets_json():
    wallet = "0x1234567890abcdef1234567890abcdef12345678"
    result = runner.invoke(cli_app.app, ["bets", "agent", wallet, "--limit", "3", "--json"])
    assert result.exit_code == 0
    out = json.loads(result.output)
    assert len(out["bets"]) == 3
    assert "betId" in out["bets"][0]


def test_agent_bets_table():
    result = runner.invoke(cli_app.app, ["bets", "agent", "0xabcdef0123456789"])
    assert result.exit_code == 0
    assert "Showing 10 of" in result.output


def test_place_is_unavailable():
    result = runner.invoke(cli_app.app, ["bets", "place", "{}", "25"])
    assert result.exit_code == 1
    assert "currently unavailable" in result.output


def test_place_rejects_bad_amount():
    assert runner.invoke(cli_app.app, ["bets", "place", "{}", "lots"]).exit_code == 2
    assert runner.invoke(cli_app.app, ["bets", "place", "{}", "0.001"]).exit_code == 2


def test_api_forwards_config_and_explicit_port(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(api_cmd, "run_api", lambda **kwargs: calls.append(kwargs))
    result = runner.invoke(cli_app.app, ["-C", str(tmp_path), "-p", "prod", "api", "--port", "0"])
    assert result.exit_code == 0
    assert calls == [
        {"host": "127.0.0.1", "port": 0, "profile": "prod", "config_dir": tmp_path},
    ]
