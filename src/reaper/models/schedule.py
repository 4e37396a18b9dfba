"""Repair schedule models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from reaper.models.common import ReaperModel, format_list, format_timestamp
from reaper.models.state import Parallelism, ScheduleState


class RepairSchedule(ReaperModel):
    """Recurring policy that triggers repair runs."""

    id: str
    owner: str = ""
    cluster_name: str = ""
    keyspace_name: str = ""
    state: ScheduleState
    column_families: list[str] = Field(default_factory=list)
    intensity: float = 0.0
    incremental_repair: bool = False
    repair_parallelism: Parallelism = Parallelism.SEQUENTIAL
    scheduled_days_between: int = 0
    segment_count: int = 0
    creation_time: datetime | None = None
    pause_time: datetime | None = None
    next_activation: datetime | None = None

    def detail_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs for the multi-line view."""
        return [
            ("id", self.id),
            ("owner", self.owner),
            ("cluster name", self.cluster_name),
            ("keyspace name", self.keyspace_name),
            ("state", self.state.value),
            ("column families", format_list(self.column_families)),
            ("intensity", f"{self.intensity:0.3f}"),
            ("incremental", "yes" if self.incremental_repair else "no"),
            ("par", self.repair_parallelism.value),
            ("days between", str(self.scheduled_days_between)),
            ("segments", str(self.segment_count)),
            ("creation time", format_timestamp(self.creation_time)),
            ("pause time", format_timestamp(self.pause_time)),
            ("next activation", format_timestamp(self.next_activation)),
        ]

    def __str__(self) -> str:
        return (
            f"{{id:{self.id} owner:{self.owner!r} cluster:{self.cluster_name!r}"
            f" keyspace:{self.keyspace_name!r} state:{self.state.value}"
            f" cf:{format_list(self.column_families)} intensity:{self.intensity:0.3f}"
            f" incremental:{str(self.incremental_repair).lower()}"
            f" par:{self.repair_parallelism.value}"
            f" daysBetween:{self.scheduled_days_between} segments:{self.segment_count}"
            f" creation:{format_timestamp(self.creation_time)}"
            f" pause:{format_timestamp(self.pause_time)}"
            f" next:{format_timestamp(self.next_activation)}}}"
        )
