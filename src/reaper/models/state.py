"""Lifecycle states and repair parallelism."""

from __future__ import annotations

from reaper.models.common import WireEnum


class RunState(WireEnum):
    """Repair run state."""

    NOT_STARTED = "NOT_STARTED"
    RUNNING = "RUNNING"
    ERROR = "ERROR"
    DONE = "DONE"
    PAUSED = "PAUSED"
    ABORTED = "ABORTED"
    DELETED = "DELETED"

    @classmethod
    def noun(cls) -> str:
        return "state"


class ScheduleState(WireEnum):
    """Repair schedule state."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    DELETED = "DELETED"

    @classmethod
    def noun(cls) -> str:
        return "state"


class Parallelism(WireEnum):
    """How the service runs the segments of a repair."""

    SEQUENTIAL = "SEQUENTIAL"
    PARALLEL = "PARALLEL"
    DATACENTER_AWARE = "DATACENTER_AWARE"

    @classmethod
    def noun(cls) -> str:
        return "parallelism"


class ScheduleSortBy(WireEnum):
    """Sort keys accepted by ``schedule list``."""

    NEXT_ACTIVATION = "next-activation"

    @classmethod
    def noun(cls) -> str:
        return "sort key"
