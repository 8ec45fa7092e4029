"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from arenamarkets.config import get_settings
from arenamarkets.config.settings import configure_logging

app = typer.Typer(
    name="arena",
    help="Arena markets - market ID codec, agent bet feeds and API server.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. prod) to overlay on default.toml"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {"settings": settings, "config_dir": config_dir, "profile": profile}


# Subcommands registered from other modules
from arenamarkets.cli import api_cmd, bets, ids  # noqa: E402

app.add_typer(ids.app, name="ids")
app.add_typer(bets.app, name="bets")
app.add_typer(api_cmd.app, name="api")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
