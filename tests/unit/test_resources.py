"""Tests for the cluster, repair run, and schedule resources."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import respx

from reaper.client import ReaperClient
from reaper.exceptions import DecodeError, ServerRejectedError
from reaper.models import Parallelism, RunState, ScheduleState


class TestClustersResource:
    """Test Clusters resource methods."""

    def test_list(self, client: ReaperClient, mock_api: respx.MockRouter) -> None:
        mock_api.get("/cluster").mock(return_value=httpx.Response(200, json=["prod", "staging"]))

        assert client.clusters.list() == ["prod", "staging"]

    def test_get(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_cluster: dict[str, Any],
    ) -> None:
        mock_api.get("/cluster/prod").mock(return_value=httpx.Response(200, json=sample_cluster))

        cluster = client.clusters.get("prod")

        assert cluster.name == "prod"
        assert cluster.repair_runs[0].id == 42

    def test_add_sends_seed_host(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_cluster: dict[str, Any],
    ) -> None:
        route = mock_api.post("/cluster").mock(
            return_value=httpx.Response(200, json=sample_cluster)
        )

        cluster = client.clusters.add("10.0.0.1")

        assert cluster.name == "prod"
        assert route.calls.last.request.url.params["seedHost"] == "10.0.0.1"

    def test_list_malformed_body(self, client: ReaperClient, mock_api: respx.MockRouter) -> None:
        """A body that is not a list of names should raise DecodeError."""
        mock_api.get("/cluster").mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(DecodeError) as exc_info:
            client.clusters.list()

        assert exc_info.value.op == "listClusters"


class TestRepairRunsResource:
    """Test RepairRuns resource methods."""

    def test_list_sends_state(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_run: dict[str, Any],
    ) -> None:
        route = mock_api.get("/repair_run").mock(
            return_value=httpx.Response(200, json=[sample_run])
        )

        runs = client.repair_runs.list(state=RunState.RUNNING)

        assert len(runs) == 1
        assert route.calls.last.request.url.params["state"] == "RUNNING"

    def test_list_without_state(
        self, client: ReaperClient, mock_api: respx.MockRouter
    ) -> None:
        route = mock_api.get("/repair_run").mock(return_value=httpx.Response(200, json=[]))

        assert client.repair_runs.list() == []
        assert "state" not in route.calls.last.request.url.params

    def test_get_not_found(self, client: ReaperClient, mock_api: respx.MockRouter) -> None:
        mock_api.get("/repair_run/999").mock(return_value=httpx.Response(404, text="not found"))

        with pytest.raises(ServerRejectedError) as exc_info:
            client.repair_runs.get(999)

        assert exc_info.value.body == "not found"
        assert exc_info.value.op == "viewRepair"

    def test_create_query(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_run: dict[str, Any],
    ) -> None:
        route = mock_api.post("/repair_run").mock(
            return_value=httpx.Response(201, json={**sample_run, "state": "NOT_STARTED"})
        )

        run = client.repair_runs.create(
            cluster_name="prod",
            keyspace="users",
            owner="alice",
            cause="weekly",
            tables=["profiles", "sessions"],
            intensity=0.75,
        )

        assert run.state is RunState.NOT_STARTED
        params = route.calls.last.request.url.params
        assert params["clusterName"] == "prod"
        assert params["keyspace"] == "users"
        assert params["tables"] == "profiles,sessions"
        assert params["owner"] == "alice"
        assert params["cause"] == "weekly"
        assert params["segmentCount"] == "200"
        assert params["repairParallelism"] == "SEQUENTIAL"
        assert params["intensity"] == "0.750"

    def test_create_without_tables(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_run: dict[str, Any],
    ) -> None:
        route = mock_api.post("/repair_run").mock(
            return_value=httpx.Response(201, json=sample_run)
        )

        client.repair_runs.create(
            cluster_name="prod",
            keyspace="users",
            owner="alice",
            cause="weekly",
            parallelism=Parallelism.PARALLEL,
        )

        params = route.calls.last.request.url.params
        assert "tables" not in params
        assert params["repairParallelism"] == "PARALLEL"

    def test_pause_and_resume(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_run: dict[str, Any],
    ) -> None:
        route = mock_api.put("/repair_run/42").mock(
            return_value=httpx.Response(200, json={**sample_run, "state": "PAUSED"})
        )

        run = client.repair_runs.pause(42)
        assert run is not None
        assert run.state is RunState.PAUSED
        assert route.calls.last.request.url.params["state"] == "PAUSED"

        client.repair_runs.resume(42)
        assert route.calls.last.request.url.params["state"] == "RUNNING"
        assert route.call_count == 2

    def test_set_state_empty_body(self, client: ReaperClient, mock_api: respx.MockRouter) -> None:
        mock_api.put("/repair_run/42").mock(return_value=httpx.Response(200))

        assert client.repair_runs.set_state(42, RunState.RUNNING) is None

    def test_set_state_plain_text_body(
        self, client: ReaperClient, mock_api: respx.MockRouter
    ) -> None:
        """An accepted change answered with text returns that text."""
        mock_api.put("/repair_run/42").mock(return_value=httpx.Response(200, text="OK"))

        assert client.repair_runs.set_state(42, RunState.RUNNING) == "OK"

    def test_delete_returns_raw_body(
        self, client: ReaperClient, mock_api: respx.MockRouter
    ) -> None:
        route = mock_api.delete("/repair_run/42").mock(
            return_value=httpx.Response(200, text='{"id": 42}')
        )

        assert client.repair_runs.delete(42, owner="alice") == '{"id": 42}'
        assert route.calls.last.request.url.params["owner"] == "alice"


class TestRepairSchedulesResource:
    """Test RepairSchedules resource methods."""

    def test_list_sends_cluster_and_keyspace(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_schedule: dict[str, Any],
    ) -> None:
        route = mock_api.get("/repair_schedule").mock(
            return_value=httpx.Response(200, json=[sample_schedule])
        )

        schedules = client.repair_schedules.list(cluster_name="prod", keyspace_name="users")

        assert schedules[0].id == "abc"
        params = route.calls.last.request.url.params
        assert params["clusterName"] == "prod"
        assert params["keyspaceName"] == "users"

    def test_create_query(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_schedule: dict[str, Any],
    ) -> None:
        route = mock_api.post("/repair_schedule").mock(
            return_value=httpx.Response(201, json=sample_schedule)
        )

        schedule = client.repair_schedules.create(
            cluster_name="prod",
            keyspace="users",
            owner="alice",
            parallelism=Parallelism.DATACENTER_AWARE,
            intensity=0.9,
            days_between=7,
            trigger_time="2024-03-08T09:00:00",
        )

        assert schedule.id == "abc"
        params = route.calls.last.request.url.params
        assert params["scheduleDaysBetween"] == "7"
        assert params["scheduleTriggerTime"] == "2024-03-08T09:00:00"
        assert params["repairParallelism"] == "DATACENTER_AWARE"
        assert params["intensity"] == "0.900"
        assert "cause" not in params

    def test_create_omits_trigger_time(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_schedule: dict[str, Any],
    ) -> None:
        route = mock_api.post("/repair_schedule").mock(
            return_value=httpx.Response(201, json=sample_schedule)
        )

        client.repair_schedules.create(cluster_name="prod", keyspace="users", owner="alice")

        params = route.calls.last.request.url.params
        assert "scheduleTriggerTime" not in params
        assert params["scheduleDaysBetween"] == "14"

    def test_resume_sends_active(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
    ) -> None:
        route = mock_api.put("/repair_schedule/abc").mock(return_value=httpx.Response(200))

        assert client.repair_schedules.resume("abc") is None
        assert route.calls.last.request.url.params["state"] == ScheduleState.ACTIVE.value

    def test_delete_decodes_schedule(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_schedule: dict[str, Any],
    ) -> None:
        mock_api.delete("/repair_schedule/abc").mock(
            return_value=httpx.Response(200, json={**sample_schedule, "state": "DELETED"})
        )

        schedule = client.repair_schedules.delete("abc", owner="alice")

        assert schedule.state is ScheduleState.DELETED

    def test_pause_plain_text_body(self, client: ReaperClient, mock_api: respx.MockRouter) -> None:
        mock_api.put("/repair_schedule/abc").mock(return_value=httpx.Response(200, text="OK"))

        assert client.repair_schedules.pause("abc") == "OK"

    def test_id_is_escaped_in_path(
        self,
        client: ReaperClient,
        mock_api: respx.MockRouter,
        sample_schedule: dict[str, Any],
    ) -> None:
        """Reserved characters in an ID stay inside one path segment."""
        route = mock_api.route(method="GET").mock(
            return_value=httpx.Response(200, json=sample_schedule)
        )

        client.repair_schedules.get("a/b?c")

        request = route.calls.last.request
        assert request.url.raw_path == b"/repair_schedule/a%2Fb%3Fc"
        assert not request.url.query
