"""Pydantic models for the Reaper REST API."""

from reaper.models.cluster import Cluster
from reaper.models.common import ReaperModel, WireEnum, parse_calendar_date
from reaper.models.repair_run import RepairRun
from reaper.models.schedule import RepairSchedule
from reaper.models.state import Parallelism, RunState, ScheduleSortBy, ScheduleState

__all__ = [
    # Common
    "ReaperModel",
    "WireEnum",
    "parse_calendar_date",
    # States
    "RunState",
    "ScheduleState",
    "Parallelism",
    "ScheduleSortBy",
    # Records
    "Cluster",
    "RepairRun",
    "RepairSchedule",
]
