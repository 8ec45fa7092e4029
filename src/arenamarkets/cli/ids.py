"""Ids subcommand: parse, encode, url, position."""

from __future__ import annotations

import json

import typer

from arenamarkets.codec import (
    encode_market_id,
    format_position,
    get_market_url,
    get_resolution_badge,
    get_source_badge,
    parse_market_id,
)
from arenamarkets.models import DataSource, ResolutionMethod

app = typer.Typer(help="Market ID parsing and encoding")


@app.command("parse")
def parse(
    market_id: str = typer.Argument(..., help="Market ID (encoded or legacy)"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
) -> None:
    """Parse a market ID and show its source, resolution method and links."""
    parsed = parse_market_id(market_id)
    source_badge = get_source_badge(parsed.data_source)
    resolution_badge = get_resolution_badge(parsed.resolution_method)
    url = get_market_url(parsed)
    if as_json:
        out = parsed.model_dump(mode="json")
        out["market_url"] = url
        out["source_badge"] = source_badge.model_dump()
        out["resolution_badge"] = resolution_badge.model_dump()
        typer.echo(json.dumps(out, indent=2, ensure_ascii=False))
        return
    typer.echo(f"Source:      {parsed.data_source} ({source_badge.label})")
    typer.echo(f"Resolution:  {parsed.resolution_method} ({resolution_badge.label})")
    typer.echo(f"Raw ID:      {parsed.raw_id}")
    typer.echo(f"Canonical:   {parsed.full_encoded}")
    typer.echo(f"URL:         {url}")


@app.command("encode")
def encode(
    source: DataSource = typer.Argument(..., help="Data source"),
    method: ResolutionMethod = typer.Argument(..., help="Resolution method"),
    raw_id: str = typer.Argument(..., help="Platform-native market identifier"),
) -> None:
    """Build a canonical market ID."""
    typer.echo(encode_market_id(source, method, raw_id))


@app.command("url")
def url(market_id: str = typer.Argument(..., help="Market ID (encoded or legacy)")) -> None:
    """Print the source platform URL for a market."""
    typer.echo(get_market_url(parse_market_id(market_id)))


@app.command("position")
def position(
    value: str = typer.Argument(..., help="Position indicator; 1 is the positive side"),
    source: DataSource | None = typer.Option(None, "--source", "-s", help="Data source"),
    market: str | None = typer.Option(None, "--market", "-m", help="Market ID to take the source from"),
) -> None:
    """Print the outcome label (YES/NO or LONG/SHORT) for a position."""
    if source is None:
        source = parse_market_id(market).data_source if market else DataSource.POLYMARKET
    typer.echo(format_position(value, source))
