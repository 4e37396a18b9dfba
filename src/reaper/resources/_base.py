"""Base resource class."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import pydantic
from pydantic import TypeAdapter

from reaper.exceptions import DecodeError

if TYPE_CHECKING:
    import httpx

    from reaper._http import HttpClient


def path_for(collection: str, *segments: Any) -> str:
    """Build ``/collection/seg...`` with every segment percent-encoded."""
    return "/".join([f"/{collection}", *(quote(str(s), safe="") for s in segments)])


class SyncResource:
    """Base class for API resources."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @staticmethod
    def _decode(op: str, response: httpx.Response, shape: Any) -> Any:
        """Decode a JSON body into ``shape`` (a model or a typing form)."""
        try:
            return TypeAdapter(shape).validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(op, e, response=response) from e

    @classmethod
    def _decode_optional(cls, op: str, response: httpx.Response, shape: Any) -> Any:
        """Decode a body the service may leave empty or fill with plain text.

        Returns None for an empty body and the raw text when it is not a
        ``shape`` record.
        """
        if not response.content.strip():
            return None
        try:
            return cls._decode(op, response, shape)
        except DecodeError:
            return response.text
