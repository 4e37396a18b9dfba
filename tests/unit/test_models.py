"""Tests for models and flag value types."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

import pytest

from reaper.exceptions import ErrorKind, ValidationError
from reaper.models import (
    Cluster,
    Parallelism,
    RepairRun,
    RepairSchedule,
    RunState,
    ScheduleSortBy,
    ScheduleState,
    parse_calendar_date,
)


class TestWireEnums:
    """Test keyword parsing of states and parallelism."""

    @pytest.mark.parametrize("enum", [RunState, ScheduleState, Parallelism])
    def test_parse_inverts_value(self, enum: Any) -> None:
        """Every member should parse back from its wire string."""
        for member in enum:
            assert enum.parse(member.value) is member
            assert enum.parse(str(member)) is member

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("running", RunState.RUNNING),
            ("Not_Started", RunState.NOT_STARTED),
            ("ABORTED", RunState.ABORTED),
        ],
    )
    def test_run_state_is_case_insensitive(self, text: str, expected: RunState) -> None:
        """Run states should parse regardless of case."""
        assert RunState.parse(text) is expected

    def test_parallelism_lowercase(self) -> None:
        """Parallelism keywords should parse in lowercase."""
        assert Parallelism.parse("datacenter_aware") is Parallelism.DATACENTER_AWARE
        assert Parallelism.parse("parallel") is Parallelism.PARALLEL

    def test_unknown_state_names_token(self) -> None:
        """An unknown keyword should raise a ValidationError naming it."""
        with pytest.raises(ValidationError) as exc_info:
            ScheduleState.parse("sleeping")

        assert "'sleeping'" in exc_info.value.message
        assert exc_info.value.kind is ErrorKind.INVALID
        assert exc_info.value.message.startswith("invalid state")

    def test_unknown_parallelism_names_token(self) -> None:
        """Parallelism errors should say what was being parsed."""
        with pytest.raises(ValidationError, match="invalid parallelism 'fast'"):
            Parallelism.parse("fast")

    def test_str_is_wire_value(self) -> None:
        """str() of a member should be its canonical wire value."""
        assert str(RunState.NOT_STARTED) == "NOT_STARTED"
        assert str(Parallelism.DATACENTER_AWARE) == "DATACENTER_AWARE"

    def test_sort_by_accepts_next_activation(self) -> None:
        """The only sort key should parse case-insensitively."""
        assert ScheduleSortBy.parse("Next-Activation") is ScheduleSortBy.NEXT_ACTIVATION


class TestCalendarDate:
    """Test YYYY-MM-DD date parsing."""

    def test_valid_date(self) -> None:
        """A well formed date should parse."""
        assert parse_calendar_date("2020-01-31") == date(2020, 1, 31)

    @pytest.mark.parametrize(
        "text",
        [
            "01-01-2020",
            "2020/01/01",
            "2020-1-1",
            "2020-01-01T00:00:00",
            "20200101",
            "",
            "2020-13-01",
        ],
    )
    def test_rejects_other_formats(self, text: str) -> None:
        """Anything but a valid YYYY-MM-DD should be rejected."""
        with pytest.raises(ValidationError):
            parse_calendar_date(text)


class TestRecords:
    """Test decoding and rendering of records."""

    def test_repair_run_from_json(self, sample_run: dict[str, Any]) -> None:
        """A repair run should decode with typed fields."""
        run = RepairRun.model_validate(sample_run)

        assert run.id == 42
        assert run.state is RunState.RUNNING
        assert run.start_time == datetime(2024, 3, 1, 10, 5, tzinfo=timezone.utc)
        assert run.end_time is None

    def test_nulls_fall_back_to_defaults(self, sample_run: dict[str, Any]) -> None:
        """JSON nulls on non-optional fields should use the field default."""
        sample_run["column_families"] = None
        sample_run["last_event"] = None

        run = RepairRun.model_validate(sample_run)

        assert run.column_families == []
        assert run.last_event == ""

    def test_repair_run_detail(self, sample_run: dict[str, Any]) -> None:
        """Detail rows should cover every field, absent timestamps as '-'."""
        rows = dict(RepairRun.model_validate(sample_run).detail_rows())

        assert rows["id"] == "42"
        assert rows["state"] == "RUNNING"
        assert rows["column families"] == "[profiles sessions]"
        assert rows["intensity"] == "0.500"
        assert rows["start time"] == "2024-03-01 10:05:00"
        assert rows["end time"] == "-"
        assert len(rows) == 16

    def test_repair_run_compact(self, sample_run: dict[str, Any]) -> None:
        """The compact form should be one line with short labels."""
        text = str(RepairRun.model_validate(sample_run))

        assert "\n" not in text
        assert text.startswith("{id:42 owner:'alice'")
        assert "state:RUNNING" in text
        assert "pause:-}" in text

    def test_schedule_from_json(self, sample_schedule: dict[str, Any]) -> None:
        """A schedule should decode with typed fields."""
        schedule = RepairSchedule.model_validate(sample_schedule)

        assert schedule.id == "abc"
        assert schedule.state is ScheduleState.ACTIVE
        assert schedule.repair_parallelism is Parallelism.DATACENTER_AWARE
        assert schedule.next_activation is not None

    def test_schedule_detail(self, sample_schedule: dict[str, Any]) -> None:
        """Schedule detail rows should use the schedule labels."""
        rows = dict(RepairSchedule.model_validate(sample_schedule).detail_rows())

        assert rows["par"] == "DATACENTER_AWARE"
        assert rows["days between"] == "7"
        assert rows["pause time"] == "-"
        assert rows["next activation"] == "2024-03-08 09:00:00"

    def test_cluster_nests_records(self, sample_cluster: dict[str, Any]) -> None:
        """A cluster should decode its runs and schedules."""
        cluster = Cluster.model_validate(sample_cluster)

        assert cluster.seed_hosts == ["10.0.0.1", "10.0.0.2"]
        assert isinstance(cluster.repair_runs[0], RepairRun)
        assert isinstance(cluster.repair_schedules[0], RepairSchedule)

    def test_json_dump_uses_wire_values(self, sample_run: dict[str, Any]) -> None:
        """JSON output should serialize states as their wire strings."""
        dumped = RepairRun.model_validate(sample_run).model_dump(mode="json")

        assert dumped["state"] == "RUNNING"
