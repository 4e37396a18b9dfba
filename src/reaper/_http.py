"""HTTP client infrastructure for the Reaper client.

Handles:
- Base URL and query string composition
- Transport error mapping
- Status code checks (the raw body becomes the error message)

Every call is a single synchronous round trip: no retries, no backoff.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from reaper._version import __version__
from reaper.exceptions import ServerRejectedError, TransportError

logger = logging.getLogger("reaper.http")

DEFAULT_HEADERS = {
    "User-Agent": f"reaper-cli-python/{__version__}",
    "Accept": "application/json",
}


class HttpClient:
    """Synchronous HTTP client for the Reaper REST API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

        self._client = httpx.Client(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, *, op: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Perform GET request."""
        return self.request("GET", path, op=op, params=params)

    def post(
        self,
        path: str,
        *,
        op: str,
        params: dict[str, Any] | None = None,
        expected_status: int = 200,
    ) -> httpx.Response:
        """Perform POST request."""
        return self.request("POST", path, op=op, params=params, expected_status=expected_status)

    def put(self, path: str, *, op: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """Perform PUT request."""
        return self.request("PUT", path, op=op, params=params)

    def delete(
        self, path: str, *, op: str, params: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Perform DELETE request."""
        return self.request("DELETE", path, op=op, params=params)

    def request(
        self,
        method: str,
        path: str,
        *,
        op: str,
        params: dict[str, Any] | None = None,
        expected_status: int = 200,
    ) -> httpx.Response:
        """Perform one HTTP request and check its status.

        Args:
            method: HTTP method.
            path: API path, appended to the base URL.
            op: Name of the calling operation, carried by any error raised.
            params: Query parameters. None values are dropped.
            expected_status: The only status code treated as success.

        Returns:
            The response, body fully read.

        Raises:
            TransportError: No response was received.
            ServerRejectedError: The status code was not ``expected_status``.
        """
        logger.debug("%s %s%s params=%s (%s)", method, self._base_url, path, params, op)

        try:
            response = self._client.request(
                method,
                path,
                params=_filter_none(params) if params else None,
            )
        except httpx.TransportError as e:
            raise TransportError(op, e) from e

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if response.status_code != expected_status:
            raise ServerRejectedError(
                op,
                response.status_code,
                response.text,
                response=response,
            )

        return response


def _filter_none(params: dict[str, Any]) -> dict[str, Any]:
    """Remove None values from params dict."""
    return {k: v for k, v in params.items() if v is not None}
