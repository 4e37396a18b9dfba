"""Configuration CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console

from reaper import _config
from reaper._config import (
    ReaperConfig,
    coerce_config_value,
    get_config_value,
    set_config_value,
)
from reaper.cli._utils import handle_error
from reaper.exceptions import ReaperError

app = typer.Typer(
    help="Configuration management.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.command("get")
def get(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Get a configuration value.

    Example:
        reaper config get host
    """
    try:
        value = get_config_value(key)
    except ReaperError as e:
        handle_error(e)

    if value is None:
        console.print(f"[dim]No value set for '{key}'[/dim]")
    else:
        console.print(str(value), markup=False, highlight=False)


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Configuration key (host, timeout, debug)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value.

    Example:
        reaper config set host reaper.internal:8080
        reaper config set timeout 30
    """
    try:
        typed_value = coerce_config_value(key, value)
        set_config_value(key, typed_value)
    except ReaperError as e:
        handle_error(e)

    console.print(f"[green]Set {key} = {typed_value}[/green]", highlight=False)


@app.command("list")
def list_config() -> None:
    """List the resolved configuration."""
    try:
        config = ReaperConfig.load()
    except ReaperError as e:
        handle_error(e)

    console.print("[bold]Current Configuration[/bold]\n")

    console.print("  host:", end=" ")
    if config.host:
        console.print(config.host, markup=False, highlight=False)
    else:
        console.print("[dim]not set[/dim]")

    console.print(f"  timeout: {config.timeout}")
    console.print(f"  debug: {config.debug}")

    console.print(f"\n[dim]Config file: {_config.CONFIG_FILE}[/dim]")


@app.command("path")
def show_path() -> None:
    """Show configuration file path."""
    console.print(str(_config.CONFIG_FILE), markup=False, highlight=False, soft_wrap=True)
