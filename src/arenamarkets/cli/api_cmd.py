"""API server command."""

import typer

from arenamarkets.api.main import run_api

app = typer.Typer(help="Start the HTTP API server")


@app.callback(invoke_without_command=True)
def api(
    ctx: typer.Context,
    host: str | None = typer.Option(None, "--host", help="Bind host (default: [api] host)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (default: [api] port)"),
) -> None:
    if ctx.invoked_subcommand is not None:
        return
    settings = ctx.obj["settings"]
    run_api(
        host=host if host is not None else settings.api_host,
        port=port if port is not None else settings.api_port,
        profile=ctx.obj.get("profile"),
        config_dir=ctx.obj.get("config_dir"),
    )


if __name__ == "__main__":
    app()
