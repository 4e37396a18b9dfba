"""CLI utilities."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

import typer
from rich.console import Console

from reaper._config import ReaperConfig
from reaper.client import ReaperClient
from reaper.exceptions import ReaperError, ValidationError
from reaper.models.common import WireEnum, parse_calendar_date

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger("reaper.cli")

LABEL_WIDTH = 20


def get_client(ctx: typer.Context) -> ReaperClient:
    """Build a client from the --host flag, REAPER_HOST, or the config file.

    Raises:
        ConfigurationError: No usable host; raised before any request.
    """
    host = ctx.obj.get("host") if ctx.obj else None
    config = ReaperConfig.load(host=host)
    client = ReaperClient.from_config(config)
    logger.debug("Using reaper at %s", client.host)
    return client


def get_json_flag(ctx: typer.Context) -> bool:
    """Get JSON output flag from context."""
    return ctx.obj.get("json", False) if ctx.obj else False


def require(value: Any, message: str) -> None:
    """Raise a ValidationError with ``message`` when ``value`` is empty."""
    if not value:
        raise ValidationError(message, op="validate")


def require_id(value: int) -> None:
    if value <= 0:
        raise ValidationError("please provide a valid ID", op="validate")


def enum_callback(enum: type[WireEnum]) -> Callable[[str | None], WireEnum | None]:
    """Option callback turning a keyword into a member of ``enum``."""

    def callback(value: str | None) -> WireEnum | None:
        if value is None:
            return None
        try:
            return enum.parse(value)
        except ValidationError as e:
            raise typer.BadParameter(e.message) from e

    return callback


def date_callback(value: str | None) -> date | None:
    """Option callback for YYYY-MM-DD dates."""
    if value is None:
        return None
    try:
        return parse_calendar_date(value)
    except ValidationError as e:
        raise typer.BadParameter(e.message) from e


def echo(text: str = "") -> None:
    """Print plain text: no markup, no highlighting, no wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def notice(text: str) -> None:
    """Print a highlighted line for state changes and section headers."""
    console.print(text, style="yellow", markup=False, highlight=False, soft_wrap=True)


def format_detail(rows: Iterable[tuple[str, str]]) -> str:
    """Render label/value pairs with a fixed label column."""
    return "\n".join(f"{label + ':':<{LABEL_WIDTH}} {value}" for label, value in rows)


def print_record(record: Any, *, compact: bool = False) -> None:
    """Print a record as one line or as a labeled block."""
    if compact:
        echo(str(record))
    else:
        echo(format_detail(record.detail_rows()))


def print_state_change(state: WireEnum, answer: Any) -> None:
    """Confirm a state change, then show the record or text the service sent back."""
    notice(f"State changed to {state.value}")
    if isinstance(answer, str):
        echo(answer)
    elif answer is not None:
        print_record(answer)


def output_json(data: Any) -> None:
    """Output data as JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    elif isinstance(data, list) and data and hasattr(data[0], "model_dump"):
        data = [item.model_dump(mode="json") for item in data]

    console.print_json(json.dumps(data, default=str))


def handle_error(e: ReaperError) -> None:
    """Display an error and exit non-zero."""
    prefix = f"{e.op}: " if e.op else ""
    error_console.print("Error:", style="red", end=" ", markup=False, highlight=False)
    error_console.print(f"{prefix}{e.message}", markup=False, highlight=False, soft_wrap=True)
    logger.debug("%s failed (%s)", e.op or "command", e.kind.value, exc_info=e)

    raise typer.Exit(1)
