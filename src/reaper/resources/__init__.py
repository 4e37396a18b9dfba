"""Resource classes for the Reaper REST API."""

from reaper.resources.clusters import Clusters
from reaper.resources.repair_runs import RepairRuns
from reaper.resources.schedules import RepairSchedules

__all__ = [
    "Clusters",
    "RepairRuns",
    "RepairSchedules",
]
