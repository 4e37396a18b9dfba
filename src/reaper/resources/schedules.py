"""Repair schedule resource operations."""

from __future__ import annotations

from typing import Any

from reaper.models.schedule import RepairSchedule
from reaper.models.state import Parallelism, ScheduleState
from reaper.resources._base import SyncResource, path_for


class RepairSchedules(SyncResource):
    """Repair schedule operations."""

    def list(
        self,
        *,
        cluster_name: str | None = None,
        keyspace_name: str | None = None,
    ) -> list[RepairSchedule]:
        """List repair schedules.

        Args:
            cluster_name: Filter by cluster (server side)
            keyspace_name: Filter by keyspace (server side)

        Returns:
            List of schedules
        """
        op = "listSchedules"
        params = {
            "clusterName": cluster_name or None,
            "keyspaceName": keyspace_name or None,
        }
        response = self._http.get("/repair_schedule", op=op, params=params)
        return self._decode(op, response, list[RepairSchedule])

    def get(self, schedule_id: str) -> RepairSchedule:
        """Get a schedule by ID."""
        op = "viewSchedule"
        response = self._http.get(path_for("repair_schedule", schedule_id), op=op)
        return self._decode(op, response, RepairSchedule)

    def create(
        self,
        *,
        cluster_name: str,
        keyspace: str,
        owner: str,
        tables: list[str] | None = None,
        segment_count: int = 200,
        parallelism: Parallelism | None = None,
        intensity: float = 0.5,
        days_between: int = 14,
        trigger_time: str | None = None,
    ) -> RepairSchedule:
        """Create a repair schedule.

        Args:
            cluster_name: Cluster to repair
            keyspace: Keyspace to repair
            owner: Owner of the schedule
            tables: Column families to repair, all of them when empty
            segment_count: Number of segments per run
            parallelism: Defaults to SEQUENTIAL
            intensity: Fraction of time spent repairing, 0 to 1
            days_between: Days between two runs
            trigger_time: When the first run starts, service default when None

        Returns:
            Created schedule
        """
        op = "addSchedule"
        params: dict[str, Any] = {
            "clusterName": cluster_name,
            "keyspace": keyspace,
            "tables": ",".join(tables) if tables else None,
            "owner": owner,
            "segmentCount": str(segment_count),
            "repairParallelism": (parallelism or Parallelism.SEQUENTIAL).value,
            "intensity": f"{intensity:0.3f}",
            "scheduleDaysBetween": str(days_between),
            "scheduleTriggerTime": trigger_time or None,
        }
        response = self._http.post(
            "/repair_schedule", op=op, params=params, expected_status=201
        )
        return self._decode(op, response, RepairSchedule)

    def set_state(self, schedule_id: str, state: ScheduleState) -> RepairSchedule | str | None:
        """Ask the service to move a schedule to ``state``.

        Returns:
            The updated schedule when the service answers with one, the raw
            body when it answers with anything else, None when it sends no body
        """
        op = "changeScheduleState"
        response = self._http.put(
            path_for("repair_schedule", schedule_id), op=op, params={"state": state.value}
        )
        return self._decode_optional(op, response, RepairSchedule)

    def pause(self, schedule_id: str) -> RepairSchedule | str | None:
        """Pause a schedule."""
        return self.set_state(schedule_id, ScheduleState.PAUSED)

    def resume(self, schedule_id: str) -> RepairSchedule | str | None:
        """Resume a paused schedule."""
        return self.set_state(schedule_id, ScheduleState.ACTIVE)

    def delete(self, schedule_id: str, *, owner: str) -> RepairSchedule:
        """Delete a schedule.

        Args:
            schedule_id: Schedule ID
            owner: Owner of the schedule, checked by the service

        Returns:
            The deleted schedule
        """
        op = "deleteSchedule"
        response = self._http.delete(
            path_for("repair_schedule", schedule_id), op=op, params={"owner": owner}
        )
        return self._decode(op, response, RepairSchedule)
