"""
Reaper CLI - command-line client for the Reaper repair service.

Clusters, repair runs, and repair schedules over the Reaper REST API.
"""

from reaper._version import __version__
from reaper.client import ReaperClient
from reaper.exceptions import (
    ConfigurationError,
    DecodeError,
    ErrorKind,
    ReaperError,
    ServerRejectedError,
    TransportError,
    ValidationError,
)
from reaper.models import (
    Cluster,
    Parallelism,
    RepairRun,
    RepairSchedule,
    RunState,
    ScheduleState,
)

__all__ = [
    # Version
    "__version__",
    # Client
    "ReaperClient",
    # Exceptions
    "ReaperError",
    "ErrorKind",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ServerRejectedError",
    "DecodeError",
    # Models
    "Cluster",
    "RepairRun",
    "RepairSchedule",
    "RunState",
    "ScheduleState",
    "Parallelism",
]
