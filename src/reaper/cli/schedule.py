"""Repair schedule CLI commands."""

from __future__ import annotations

import typer

from reaper.cli._utils import (
    console,
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
)
from reaper.exceptions import ReaperError
from reaper.filters import ScheduleFilter, filter_schedules, sort_schedules, split_values
from reaper.models import Parallelism, ScheduleSortBy, ScheduleState

app = typer.Typer(
    help="Repair schedule commands.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

ID_OPTION_HELP = "The schedule ID"


@app.command("list")
def list_schedules(
    ctx: typer.Context,
    cluster: str = typer.Option("", "--cluster", help="The cluster name"),
    keyspace: str = typer.Option("", "--keyspace", help="The keyspace name"),
    state: str | None = typer.Option(
        None,
        "--state",
        help="Filter by state",
        callback=enum_callback(ScheduleState),
    ),
    sort_by: str | None = typer.Option(
        None,
        "--sort-by",
        help="Sort by next-activation",
        callback=enum_callback(ScheduleSortBy),
    ),
    reverse_sort: bool = typer.Option(False, "--reverse-sort", help="Reverse the sorting"),
    compact: bool = typer.Option(False, "--compact", help="One line per schedule"),
) -> None:
    """List repair schedules.

    Cluster and keyspace are sent to the server; the state filter and
    sorting are applied locally.
    """
    try:
        client = get_client(ctx)
        schedules = client.repair_schedules.list(
            cluster_name=cluster or None,
            keyspace_name=keyspace or None,
        )

        schedules = sort_schedules(schedules, sort_by, reverse_sort)  # type: ignore[arg-type]
        schedules = filter_schedules(
            schedules,
            ScheduleFilter(keyspace=keyspace or None, state=state),  # type: ignore[arg-type]
        )

        if get_json_flag(ctx):
            output_json(schedules)
            return

        for schedule in schedules:
            print_record(schedule, compact=compact)
            if not compact:
                echo()

    except ReaperError as e:
        handle_error(e)


@app.command("next")
def next_schedule(ctx: typer.Context) -> None:
    """Show the schedule that activates first."""
    try:
        client = get_client(ctx)
        schedules = sort_schedules(client.repair_schedules.list())

        if not schedules:
            if get_json_flag(ctx):
                output_json(None)
            else:
                console.print("[dim]No schedules found.[/dim]")
            return

        if get_json_flag(ctx):
            output_json(schedules[0])
            return

        print_record(schedules[0])
        echo()

    except ReaperError as e:
        handle_error(e)


@app.command("view")
def view_schedule(
    ctx: typer.Context,
    schedule_id: str = typer.Option("", "--id", help=ID_OPTION_HELP),
) -> None:
    """Show one repair schedule."""
    try:
        client = get_client(ctx)

        require(schedule_id, "please provide a valid ID")

        schedule = client.repair_schedules.get(schedule_id)

        if get_json_flag(ctx):
            output_json(schedule)
        else:
            print_record(schedule)

    except ReaperError as e:
        handle_error(e)


@app.command("add")
def add_schedule(
    ctx: typer.Context,
    cluster: str = typer.Option("", "--cluster", help="The cluster name"),
    keyspace: str = typer.Option("", "--keyspace", help="The keyspace name"),
    tables: list[str] | None = typer.Option(None, "--tables", help="The tables to repair"),
    owner: str = typer.Option("", "--owner", help="The owner"),
    segments: int = typer.Option(200, "--segments", help="The number of segments"),
    par: str | None = typer.Option(
        None,
        "--par",
        help="The parallelism to use (default SEQUENTIAL)",
        callback=enum_callback(Parallelism),
    ),
    intensity: float = typer.Option(0.5, "--intensity", help="The intensity"),
    incremental: bool = typer.Option(False, "--incremental", help="Use incremental repairs"),
    days_between: int = typer.Option(
        14, "--schedule-days-between", help="Number of days between repairs"
    ),
    trigger_time: str = typer.Option(
        "", "--schedule-trigger-time", help="Time at which to start the scheduling"
    ),
) -> None:
    """Create a repair schedule."""
    try:
        client = get_client(ctx)

        if incremental:
            echo("NOTE: incremental repairs are not supported yet")

        require(cluster, "please provide a cluster")
        require(keyspace, "please provide a keyspace")
        require(owner, "please provide an owner")

        schedule = client.repair_schedules.create(
            cluster_name=cluster,
            keyspace=keyspace,
            owner=owner,
            tables=split_values(tables),
            segment_count=segments,
            parallelism=par or Parallelism.SEQUENTIAL,  # type: ignore[arg-type]
            intensity=intensity,
            days_between=days_between,
            trigger_time=trigger_time or None,
        )

        if get_json_flag(ctx):
            output_json(schedule)
            return

        notice(f"Schedule {schedule.id} correctly added")
        print_record(schedule)

    except ReaperError as e:
        handle_error(e)


def change_schedule_state(ctx: typer.Context, schedule_id: str, state: ScheduleState) -> None:
    """Request a state change and show what the service answered."""
    try:
        client = get_client(ctx)

        require(schedule_id, "please provide a valid ID")

        schedule = client.repair_schedules.set_state(schedule_id, state)

        if get_json_flag(ctx):
            output_json(schedule)
            return

        print_state_change(state, schedule)

    except ReaperError as e:
        handle_error(e)


@app.command("pause")
def pause_schedule(
    ctx: typer.Context,
    schedule_id: str = typer.Option("", "--id", help=ID_OPTION_HELP),
) -> None:
    """Pause a schedule."""
    change_schedule_state(ctx, schedule_id, ScheduleState.PAUSED)


@app.command("resume")
def resume_schedule(
    ctx: typer.Context,
    schedule_id: str = typer.Option("", "--id", help=ID_OPTION_HELP),
) -> None:
    """Resume a paused schedule."""
    change_schedule_state(ctx, schedule_id, ScheduleState.ACTIVE)


@app.command("delete")
def delete_schedule(
    ctx: typer.Context,
    schedule_id: str = typer.Option("", "--id", help=ID_OPTION_HELP),
    owner: str = typer.Option("", "--owner", help="The owner"),
) -> None:
    """Delete a repair schedule."""
    try:
        client = get_client(ctx)

        require(schedule_id, "please provide a valid ID")
        require(owner, "please provide a valid owner")

        schedule = client.repair_schedules.delete(schedule_id, owner=owner)

        if get_json_flag(ctx):
            output_json(schedule)
            return

        notice(f"Schedule {schedule_id} correctly deleted")
        print_record(schedule)

    except ReaperError as e:
        handle_error(e)
