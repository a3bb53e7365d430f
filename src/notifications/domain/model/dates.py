"""Date value objects used by the date/time rules.

Parsing returns an explicit success/failure record instead of falling
back to a sentinel date, so a legitimately entered ``0001-01-01`` is
never mistaken for a parse failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.title()


class TextComparison(Enum):
    """How two strings are compared for equality."""

    ORDINAL = "ORDINAL"
    IGNORE_CASE = "IGNORE_CASE"


@dataclass(frozen=True)
class DateParseResult:
    """Outcome of parsing date text: either ``value`` or a failure."""

    text: str | None
    value: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def parse_datetime(text: str | None) -> DateParseResult:
    """Parse ISO 8601 text (``2024-05-01`` or ``2024-05-01T10:30:00``).

    A bare date becomes midnight of that day.
    """
    if text is None or not text.strip():
        return DateParseResult(text)
    try:
        return DateParseResult(text, datetime.fromisoformat(text.strip()))
    except ValueError:
        return DateParseResult(text)
