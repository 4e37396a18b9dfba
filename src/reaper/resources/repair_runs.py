"""Repair run resource operations."""

from __future__ import annotations

from typing import Any

from reaper.models.repair_run import RepairRun
from reaper.models.state import Parallelism, RunState
from reaper.resources._base import SyncResource, path_for


class RepairRuns(SyncResource):
    """Repair run operations."""

    def list(self, *, state: RunState | None = None) -> list[RepairRun]:
        """List repair runs.

        Args:
            state: Only runs in this state (filtered by the service)

        Returns:
            List of repair runs
        """
        op = "listRepairs"
        params = {"state": state.value if state else None}
        response = self._http.get("/repair_run", op=op, params=params)
        return self._decode(op, response, list[RepairRun])

    def get(self, run_id: int) -> RepairRun:
        """Get a repair run by ID."""
        op = "viewRepair"
        response = self._http.get(path_for("repair_run", run_id), op=op)
        return self._decode(op, response, RepairRun)

    def create(
        self,
        *,
        cluster_name: str,
        keyspace: str,
        owner: str,
        cause: str,
        tables: list[str] | None = None,
        segment_count: int = 200,
        parallelism: Parallelism | None = None,
        intensity: float = 0.5,
    ) -> RepairRun:
        """Create a repair run.

        The service creates it in NOT_STARTED; resume it to start repairing.

        Args:
            cluster_name: Cluster to repair
            keyspace: Keyspace to repair
            owner: Owner of the run
            cause: Why the repair is run
            tables: Column families to repair, all of them when empty
            segment_count: Number of segments
            parallelism: Defaults to SEQUENTIAL
            intensity: Fraction of time spent repairing, 0 to 1

        Returns:
            Created repair run
        """
        op = "addRepair"
        params: dict[str, Any] = {
            "clusterName": cluster_name,
            "keyspace": keyspace,
            "tables": ",".join(tables) if tables else None,
            "owner": owner,
            "cause": cause,
            "segmentCount": str(segment_count),
            "repairParallelism": (parallelism or Parallelism.SEQUENTIAL).value,
            "intensity": f"{intensity:0.3f}",
        }
        response = self._http.post("/repair_run", op=op, params=params, expected_status=201)
        return self._decode(op, response, RepairRun)

    def set_state(self, run_id: int, state: RunState) -> RepairRun | str | None:
        """Ask the service to move a run to ``state``.

        Returns:
            The updated run when the service answers with one, the raw
            body when it answers with anything else, None when it sends
            no body
        """
        op = "changeRepairState"
        response = self._http.put(
            path_for("repair_run", run_id), op=op, params={"state": state.value}
        )
        return self._decode_optional(op, response, RepairRun)

    def pause(self, run_id: int) -> RepairRun | str | None:
        """Pause a running repair."""
        return self.set_state(run_id, RunState.PAUSED)

    def resume(self, run_id: int) -> RepairRun | str | None:
        """Start or resume a repair."""
        return self.set_state(run_id, RunState.RUNNING)

    def delete(self, run_id: int, *, owner: str) -> str:
        """Delete a repair run.

        Args:
            run_id: Repair run ID
            owner: Owner of the run, checked by the service

        Returns:
            The raw response body
        """
        op = "deleteRepair"
        response = self._http.delete(
            path_for("repair_run", run_id), op=op, params={"owner": owner}
        )
        return response.text
