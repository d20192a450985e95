"""Command-line interface for the Voice Connect backend."""

import sys
from typing import Optional

import click
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ConfigurationError, Settings, get_settings
from .services.connection import create_connection_details
from .voice.factory import create_token_issuer


console = Console()


def _settings(ctx: click.Context) -> Settings:
    """Settings passed in by the caller, else the cached environment settings.

    Exits with an error line when the environment holds invalid values.
    """
    try:
        return ctx.obj.get("settings") or get_settings()
    except (ConfigurationError, SettingsError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def main(ctx: click.Context):
    """Voice Connect - Issue LiveKit room tokens with agent dispatch."""
    ctx.ensure_object(dict)


@main.command()
@click.option("--identity", default=None, help="Participant identity (random if omitted)")
@click.option("--room", "room_name", default=None, help="Room name (random if omitted)")
@click.option("--json", "as_json", is_flag=True, help="Print connection details as JSON")
@click.pass_context
def token(ctx: click.Context, identity: Optional[str], room_name: Optional[str], as_json: bool):
    """Mint connection details for a single participant."""
    settings = _settings(ctx)

    try:
        details = create_connection_details(
            settings,
            create_token_issuer(settings),
            identity=identity,
            room_name=room_name,
        )
    except (ConfigurationError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if as_json:
        click.echo(details.model_dump_json(by_alias=True))
        return

    table = Table(title="Connection Details")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white", overflow="fold")
    for key, value in details.model_dump(by_alias=True).items():
        table.add_row(key, value)
    console.print(table)

    if settings.agent_dispatch_enabled:
        console.print(f"[dim]Agent dispatched on join: {settings.agent_name}[/dim]")


@main.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST)")
@click.option("--port", type=int, default=None, help="Port (defaults to PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool):
    """Run the HTTP server."""
    import uvicorn

    settings = _settings(ctx)
    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload or settings.debug,
    )


if __name__ == "__main__":
    main()
