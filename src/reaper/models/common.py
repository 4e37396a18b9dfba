"""Common models and value types shared across resources."""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from reaper.exceptions import ValidationError

E = TypeVar("E", bound="WireEnum")

CALENDAR_DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_CALENDAR_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ReaperModel(BaseModel):
    """Base model for all records returned by the Reaper service."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """JSON nulls fall back to field defaults, like missing keys."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class WireEnum(str, Enum):
    """Enum whose value is the canonical uppercase wire string.

    Parsing from user input is case-insensitive.
    """

    @classmethod
    def noun(cls) -> str:
        return "value"

    @classmethod
    def parse(cls: type[E], value: str) -> E:
        """Parse a user supplied keyword.

        Raises:
            ValidationError: ``value`` matches no member.
        """
        wanted = value.lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValidationError(f"invalid {cls.noun()} {value!r}", op="parse")

    def __str__(self) -> str:
        return self.value


def parse_calendar_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date.

    Raises:
        ValidationError: ``value`` is not a valid date in that exact format.
    """
    if not _CALENDAR_DATE_RE.fullmatch(value):
        raise ValidationError(f"invalid date {value!r}, expected YYYY-MM-DD", op="parse")
    try:
        return datetime.strptime(value, CALENDAR_DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(f"invalid date {value!r}: {e}", op="parse") from e


def format_timestamp(value: datetime | None) -> str:
    """Render an optional timestamp, ``-`` when absent."""
    if value is None:
        return "-"
    return value.strftime(TIMESTAMP_FORMAT)


def format_list(values: list[str]) -> str:
    return "[" + " ".join(values) + "]"
