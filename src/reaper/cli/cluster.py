"""Cluster CLI commands."""

from __future__ import annotations

import typer

from reaper.cli._utils import (
    echo,
    enum_callback,
    get_client,
    get_json_flag,
    handle_error,
    notice,
    output_json,
    print_record,
    require,
)
from reaper.exceptions import ReaperError
from reaper.filters import ClusterView, split_values
from reaper.models import Cluster, RunState, ScheduleState

app = typer.Typer(
    help="Cluster management commands.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def print_cluster(cluster: Cluster, view: ClusterView) -> None:
    """Print the seeds of a cluster, then the runs and schedules ``view`` selects."""
    notice("Seeds:")
    for seed in cluster.seed_hosts:
        echo(seed)
    echo()

    runs = view.runs(cluster)
    if runs:
        notice("Runs:")
        for run in runs:
            print_record(run)
            echo()

    schedules = view.schedules(cluster)
    if schedules:
        notice("Schedules:")
        for schedule in schedules:
            print_record(schedule)
            echo()


@app.command("list")
def list_clusters(ctx: typer.Context) -> None:
    """List the names of all clusters."""
    try:
        client = get_client(ctx)
        names = client.clusters.list()

        if get_json_flag(ctx):
            output_json(names)
            return

        echo("All clusters:")
        echo()
        for name in names:
            echo(name)

    except ReaperError as e:
        handle_error(e)


@app.command("view")
def view_cluster(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help="Cluster name"),
    show_runs: bool = typer.Option(
        True, "--runs/--no-runs", help="Show all runs from this cluster"
    ),
    show_schedules: bool = typer.Option(
        False, "--schedules/--no-schedules", help="Show all schedules from this cluster"
    ),
    cfs: list[str] | None = typer.Option(
        None, "--cf", help="Filter by column families (repeatable or comma separated)"
    ),
    run_state: str | None = typer.Option(
        None,
        "--run-state",
        help="Filter by run state",
        callback=enum_callback(RunState),
    ),
    schedule_state: str | None = typer.Option(
        None,
        "--schedule-state",
        help="Filter by schedule state",
        callback=enum_callback(ScheduleState),
    ),
) -> None:
    """Show a cluster, its seeds, runs, and schedules.

    Examples:
        reaper cluster view prod --cf users,events
        reaper cluster view prod --no-runs --schedules --schedule-state active
    """
    try:
        client = get_client(ctx)

        require(name, "please provide a cluster name")

        cluster = client.clusters.get(name)  # type: ignore[arg-type]

        if get_json_flag(ctx):
            output_json(cluster)
            return

        view = ClusterView(
            show_runs=show_runs,
            show_schedules=show_schedules,
            tables=split_values(cfs),
            run_state=run_state,  # type: ignore[arg-type]
            schedule_state=schedule_state,  # type: ignore[arg-type]
        )

        echo(f'Cluster "{name}":')
        echo()
        print_cluster(cluster, view)

    except ReaperError as e:
        handle_error(e)


@app.command("add")
def add_cluster(
    ctx: typer.Context,
    seed: str = typer.Option("", "--seed", help="The seed host"),
) -> None:
    """Register a cluster in Reaper through one of its seed hosts."""
    try:
        client = get_client(ctx)

        require(seed, "please provide a seed host")

        cluster = client.clusters.add(seed)

        if get_json_flag(ctx):
            output_json(cluster)
            return

        notice(f"Cluster {cluster.name} correctly added")
        print_cluster(cluster, ClusterView(show_runs=False))

    except ReaperError as e:
        handle_error(e)
