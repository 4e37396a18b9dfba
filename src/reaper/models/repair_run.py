"""Repair run models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from reaper.models.common import ReaperModel, format_list, format_timestamp
from reaper.models.state import RunState


class RepairRun(ReaperModel):
    """One repair of a keyspace, driven by the service through its states."""

    id: int
    owner: str = ""
    cluster_name: str = ""
    keyspace_name: str = ""
    state: RunState
    cause: str = ""
    column_families: list[str] = Field(default_factory=list)
    intensity: float = 0.0
    total_segments: int = 0
    segments_repaired: int = 0
    last_event: str = ""
    duration: str = ""
    creation_time: datetime | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    pause_time: datetime | None = None

    def detail_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs for the multi-line view."""
        return [
            ("id", str(self.id)),
            ("owner", self.owner),
            ("cluster name", self.cluster_name),
            ("keyspace name", self.keyspace_name),
            ("state", self.state.value),
            ("cause", self.cause),
            ("column families", format_list(self.column_families)),
            ("intensity", f"{self.intensity:0.3f}"),
            ("total segments", str(self.total_segments)),
            ("segments repaired", str(self.segments_repaired)),
            ("last event", self.last_event),
            ("duration", self.duration),
            ("creation time", format_timestamp(self.creation_time)),
            ("start time", format_timestamp(self.start_time)),
            ("end time", format_timestamp(self.end_time)),
            ("pause time", format_timestamp(self.pause_time)),
        ]

    def __str__(self) -> str:
        return (
            f"{{id:{self.id} owner:{self.owner!r} cluster:{self.cluster_name!r}"
            f" keyspace:{self.keyspace_name!r} state:{self.state.value} cause:{self.cause!r}"
            f" cf:{format_list(self.column_families)} intensity:{self.intensity:0.3f}"
            f" segments:{self.total_segments} repaired:{self.segments_repaired}"
            f" lastEvent:{self.last_event!r} duration:{self.duration!r}"
            f" creation:{format_timestamp(self.creation_time)}"
            f" start:{format_timestamp(self.start_time)}"
            f" end:{format_timestamp(self.end_time)}"
            f" pause:{format_timestamp(self.pause_time)}}}"
        )
