"""Repair run CLI commands."""

from __future__ import annotations

import typer

from reaper.cli._utils import (
    date_callback,
    echo,
    enum_callback,
    get_client,
    get_json_flag,
    handle_error,
    notice,
    output_json,
    print_record,
    print_state_change,
    require,
    require_id,
)
from reaper.exceptions import ReaperError
from reaper.filters import RunFilter, filter_runs, split_values
from reaper.models import Parallelism, RunState

app = typer.Typer(
    help="Repair run commands.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

ID_OPTION_HELP = "The repair ID"


@app.command("list")
def list_repairs(
    ctx: typer.Context,
    run_state: str | None = typer.Option(
        None,
        "--run-state",
        help="Filter by run state (sent to the server)",
        callback=enum_callback(RunState),
    ),
    cluster: str = typer.Option("", "--cluster", help="Filter by cluster"),
    keyspace: str = typer.Option("", "--keyspace", help="Filter by keyspace"),
    tables: list[str] | None = typer.Option(
        None, "--tables", help="Exclude runs touching these tables (comma separated list)"
    ),
    owner: str = typer.Option("", "--owner", help="Filter by owner"),
    cause: str = typer.Option("", "--cause", help="Filter by cause"),
    start_after: str | None = typer.Option(
        None,
        "--start-after",
        help="Only runs started on or after this date (YYYY-MM-DD)",
        callback=date_callback,
    ),
    start_before: str | None = typer.Option(
        None,
        "--start-before",
        help="Only runs started on or before this date (YYYY-MM-DD)",
        callback=date_callback,
    ),
    compact: bool = typer.Option(False, "--compact", help="One line per run"),
) -> None:
    """List repair runs.

    Examples:
        reaper repair list --run-state running
        reaper repair list --cluster prod --start-after 2024-01-01
    """
    try:
        client = get_client(ctx)
        runs = client.repair_runs.list(state=run_state)  # type: ignore[arg-type]

        criteria = RunFilter(
            cluster=cluster or None,
            keyspace=keyspace or None,
            tables=split_values(tables),
            owner=owner or None,
            cause=cause or None,
            start_after=start_after,  # type: ignore[arg-type]
            start_before=start_before,  # type: ignore[arg-type]
        )
        runs = filter_runs(runs, criteria)

        if get_json_flag(ctx):
            output_json(runs)
            return

        for run in runs:
            print_record(run, compact=compact)

    except ReaperError as e:
        handle_error(e)


@app.command("view")
def view_repair(
    ctx: typer.Context,
    repair_id: int = typer.Option(-1, "--id", help=ID_OPTION_HELP),
) -> None:
    """Show one repair run."""
    try:
        client = get_client(ctx)

        require_id(repair_id)

        run = client.repair_runs.get(repair_id)

        if get_json_flag(ctx):
            output_json(run)
        else:
            print_record(run)

    except ReaperError as e:
        handle_error(e)


@app.command("add")
def add_repair(
    ctx: typer.Context,
    cluster: str = typer.Option("", "--cluster", help="The cluster name"),
    keyspace: str = typer.Option("", "--keyspace", help="The keyspace name"),
    tables: list[str] | None = typer.Option(None, "--tables", help="The tables to repair"),
    owner: str = typer.Option("", "--owner", help="The owner"),
    cause: str = typer.Option("", "--cause", help="The cause for the repair"),
    segments: int = typer.Option(200, "--segments", help="The number of segments"),
    par: str | None = typer.Option(
        None,
        "--par",
        help="The parallelism to use (default SEQUENTIAL)",
        callback=enum_callback(Parallelism),
    ),
    intensity: float = typer.Option(0.5, "--intensity", help="The intensity"),
) -> None:
    """Create a repair run.

    The new run does not start until it is resumed.
    """
    try:
        client = get_client(ctx)

        require(cluster, "please provide a cluster")
        require(keyspace, "please provide a keyspace")
        require(owner, "please provide an owner")
        require(cause, "please provide a cause")

        run = client.repair_runs.create(
            cluster_name=cluster,
            keyspace=keyspace,
            owner=owner,
            cause=cause,
            tables=split_values(tables),
            segment_count=segments,
            parallelism=par or Parallelism.SEQUENTIAL,  # type: ignore[arg-type]
            intensity=intensity,
        )

        if get_json_flag(ctx):
            output_json(run)
            return

        notice(f"Repair #{run.id} correctly added")
        print_record(run)
        notice(
            "NOTE: remember to resume the repair just created"
            f" (reaper repair resume --id {run.id})"
        )

    except ReaperError as e:
        handle_error(e)


def change_repair_state(ctx: typer.Context, repair_id: int, state: RunState) -> None:
    """Request a state change and show what the service answered."""
    try:
        client = get_client(ctx)

        require_id(repair_id)

        run = client.repair_runs.set_state(repair_id, state)

        if get_json_flag(ctx):
            output_json(run)
            return

        print_state_change(state, run)

    except ReaperError as e:
        handle_error(e)


@app.command("pause")
def pause_repair(
    ctx: typer.Context,
    repair_id: int = typer.Option(-1, "--id", help=ID_OPTION_HELP),
) -> None:
    """Pause a running repair."""
    change_repair_state(ctx, repair_id, RunState.PAUSED)


@app.command("resume")
def resume_repair(
    ctx: typer.Context,
    repair_id: int = typer.Option(-1, "--id", help=ID_OPTION_HELP),
) -> None:
    """Start a new repair or resume a paused one."""
    change_repair_state(ctx, repair_id, RunState.RUNNING)


@app.command("delete")
def delete_repair(
    ctx: typer.Context,
    repair_id: int = typer.Option(-1, "--id", help=ID_OPTION_HELP),
    owner: str = typer.Option("", "--owner", help="The owner"),
) -> None:
    """Delete a repair run."""
    try:
        client = get_client(ctx)

        require_id(repair_id)
        require(owner, "please provide a valid owner")

        body = client.repair_runs.delete(repair_id, owner=owner)

        if body:
            echo(body)

    except ReaperError as e:
        handle_error(e)
