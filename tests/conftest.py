"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import respx

from reaper.client import ReaperClient


@pytest.fixture
def host() -> str:
    """Test reaper host."""
    return "reaper.test:8080"


@pytest.fixture
def base_url(host: str) -> str:
    """Base URL the client derives from the host."""
    return f"http://{host}"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Keep the user's config file and REAPER_* variables out of tests."""
    for name in ("REAPER_HOST", "REAPER_TIMEOUT", "REAPER_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    config_file = tmp_path / "config.toml"
    with patch("reaper._config.CONFIG_FILE", config_file):
        yield config_file


@pytest.fixture
def mock_api(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock API router."""
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(host: str) -> Generator[ReaperClient, None, None]:
    """Create a test ReaperClient."""
    c = ReaperClient(host)
    yield c
    c.close()


# Sample response data
@pytest.fixture
def sample_run() -> dict[str, Any]:
    """Sample repair run response."""
    return {
        "id": 42,
        "owner": "alice",
        "cluster_name": "prod",
        "keyspace_name": "users",
        "state": "RUNNING",
        "cause": "weekly",
        "column_families": ["profiles", "sessions"],
        "intensity": 0.5,
        "total_segments": 200,
        "segments_repaired": 57,
        "last_event": "Triggered repair of segment 58",
        "duration": "2 hours 3 minutes",
        "creation_time": "2024-03-01T10:00:00Z",
        "start_time": "2024-03-01T10:05:00Z",
        "end_time": None,
        "pause_time": None,
    }


@pytest.fixture
def sample_schedule() -> dict[str, Any]:
    """Sample repair schedule response."""
    return {
        "id": "abc",
        "owner": "alice",
        "cluster_name": "prod",
        "keyspace_name": "users",
        "state": "ACTIVE",
        "column_families": ["profiles"],
        "intensity": 0.9,
        "incremental_repair": False,
        "repair_parallelism": "DATACENTER_AWARE",
        "scheduled_days_between": 7,
        "segment_count": 64,
        "creation_time": "2024-03-01T09:00:00Z",
        "pause_time": None,
        "next_activation": "2024-03-08T09:00:00Z",
    }


@pytest.fixture
def sample_cluster(sample_run: dict[str, Any], sample_schedule: dict[str, Any]) -> dict[str, Any]:
    """Sample cluster response."""
    return {
        "name": "prod",
        "seed_hosts": ["10.0.0.1", "10.0.0.2"],
        "repair_runs": [sample_run],
        "repair_schedules": [sample_schedule],
    }
