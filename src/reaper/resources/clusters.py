"""Clusters resource."""

from __future__ import annotations

from reaper.models.cluster import Cluster
from reaper.resources._base import SyncResource, path_for


class Clusters(SyncResource):
    """Clusters registered in Reaper.

    Example:
        ```python
        from reaper import ReaperClient

        with ReaperClient("reaper.local:8080") as client:
            for name in client.clusters.list():
                print(name)
        ```
    """

    def list(self) -> list[str]:
        """List the names of all clusters."""
        op = "listClusters"
        response = self._http.get("/cluster", op=op)
        return self._decode(op, response, list[str])

    def get(self, name: str) -> Cluster:
        """Get a cluster with its runs and schedules.

        Args:
            name: Cluster name

        Returns:
            Cluster
        """
        op = "viewCluster"
        response = self._http.get(path_for("cluster", name), op=op)
        return self._decode(op, response, Cluster)

    def add(self, seed_host: str) -> Cluster:
        """Register a cluster through one of its seed hosts.

        Args:
            seed_host: Address of a seed node

        Returns:
            The cluster as registered by the service
        """
        op = "addCluster"
        response = self._http.post("/cluster", op=op, params={"seedHost": seed_host})
        return self._decode(op, response, Cluster)
