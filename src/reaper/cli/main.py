"""Main CLI entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from reaper._config import env_debug
from reaper._logging import configure_logging
from reaper._version import __version__
from reaper.cli import cluster, config, repair, schedule

app = typer.Typer(
    name="reaper",
    help="Reaper CLI - manage clusters, repairs, and repair schedules.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()

# Register sub-commands
app.add_typer(cluster.app, name="cluster", help="Cluster management")
app.add_typer(repair.app, name="repair", help="Repair runs")
app.add_typer(schedule.app, name="schedule", help="Repair schedules")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"reaper-cli version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    host: str | None = typer.Option(
        None,
        "--host",
        help="The reaper host as host[:port] (default: $REAPER_HOST)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log HTTP requests to stderr",
    ),
) -> None:
    """Reaper CLI - manage clusters, repairs, and repair schedules."""
    ctx.ensure_object(dict)
    ctx.obj["host"] = host
    ctx.obj["json"] = json_output

    configure_logging(debug or env_debug())

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(2)


if __name__ == "__main__":
    app()
