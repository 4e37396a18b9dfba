"""Cluster models."""

from __future__ import annotations

from pydantic import Field

from reaper.models.common import ReaperModel
from reaper.models.repair_run import RepairRun
from reaper.models.schedule import RepairSchedule


class Cluster(ReaperModel):
    """Cluster known to the Reaper service."""

    name: str = Field(..., description="Cluster name")
    seed_hosts: list[str] = Field(default_factory=list, description="Seed host addresses")
    repair_runs: list[RepairRun] = Field(default_factory=list)
    repair_schedules: list[RepairSchedule] = Field(default_factory=list)
