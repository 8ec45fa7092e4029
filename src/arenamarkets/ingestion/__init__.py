"""Backend data feeds."""

from arenamarkets.ingestion.agent_bets import fetch_agent_bets, generate_mock_agent_bets

__all__ = ["fetch_agent_bets", "generate_mock_agent_bets"]
