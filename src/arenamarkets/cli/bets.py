"""Bets subcommand: agent, place."""

from __future__ import annotations

import asyncio
from decimal import InvalidOperation

import typer

from arenamarkets.betting import BetPlacer
from arenamarkets.chain import MIN_BET_AMOUNT, usdc_to_base_units
from arenamarkets.ingestion import fetch_agent_bets

app = typer.Typer(help="Agent bet history and bet placement")


@app.command("agent")
def agent(
    ctx: typer.Context,
    wallet: str = typer.Argument(..., help="Agent wallet address"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, max=100, help="Max bets to show"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
) -> None:
    """Show an agent's recent bets (synthetic data when the backend is unavailable)."""
    settings = ctx.obj["settings"]
    resp = asyncio.run(
        fetch_agent_bets(
            wallet,
            limit or settings.default_bet_limit,
            base_url=settings.backend_url,
            timeout=settings.request_timeout_sec,
        )
    )
    if as_json:
        typer.echo(resp.model_dump_json(by_alias=True, indent=2))
        return
    for b in resp.bets:
        outcome = b.outcome or "-"
        typer.echo(
            f"  {b.bet_id}  {b.status:<8} {outcome:<5} ${b.amount:>7.2f}  {b.result:+9.2f}  "
            f"{b.portfolio_size:>6} mkts  {b.created_at}"
        )
    typer.echo(f"Showing {len(resp.bets)} of {resp.total} bets")


@app.command("place")
def place(
    portfolio_json: str = typer.Argument(..., help="Portfolio JSON"),
    amount: str = typer.Argument(..., help="Stake in USDC, e.g. 25.50"),
) -> None:
    """Place a bet. Placement is currently disabled."""
    try:
        base_units = usdc_to_base_units(amount)
    except (InvalidOperation, ValueError, OverflowError):
        typer.echo(f"Invalid amount: {amount}", err=True)
        raise typer.Exit(2)
    if base_units < MIN_BET_AMOUNT:
        typer.echo(f"Amount below minimum bet of {MIN_BET_AMOUNT} base units", err=True)
        raise typer.Exit(2)
    placer = BetPlacer()
    result = asyncio.run(placer.place_bet(portfolio_json, base_units))
    placer.reset()
    if result.error:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Placed bet {result.bet_id} (tx {result.tx_hash})")
