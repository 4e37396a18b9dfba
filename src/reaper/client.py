"""Reaper client.

Main entry point for talking to a Reaper service.
"""

from __future__ import annotations

from typing import Any

from reaper._config import DEFAULT_TIMEOUT, ReaperConfig, validate_host
from reaper._http import HttpClient
from reaper.resources.clusters import Clusters
from reaper.resources.repair_runs import RepairRuns
from reaper.resources.schedules import RepairSchedules


class ReaperClient:
    """Synchronous client for the Reaper REST API.

    Example:
        ```python
        from reaper import ReaperClient

        with ReaperClient("reaper.local:8080") as client:
            run = client.repair_runs.get(42)
            client.repair_runs.resume(run.id)
        ```

    Each method performs exactly one HTTP call; failures raise a
    ReaperError subclass and are never retried.
    """

    def __init__(self, host: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            host: Reaper host as host[:port]. Plain HTTP is used.
            timeout: Transport timeout in seconds.
        """
        self._host = validate_host(host)
        self._http = HttpClient(base_url=f"http://{self._host}", timeout=timeout)

        self.clusters = Clusters(self._http)
        self.repair_runs = RepairRuns(self._http)
        self.repair_schedules = RepairSchedules(self._http)

    @classmethod
    def from_config(cls, config: ReaperConfig) -> ReaperClient:
        """Build a client from resolved configuration.

        Raises:
            ConfigurationError: No usable host is configured.
        """
        return cls(config.require_host(), timeout=config.timeout)

    @property
    def host(self) -> str:
        return self._host

    def close(self) -> None:
        """Close the client."""
        self._http.close()

    def __enter__(self) -> ReaperClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
