"""Timestamp selection and formatting for the date column.

Month names are always English abbreviations so column widths stay
predictable regardless of locale.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from enum import Enum

from ..file_model.types import FileRecord

MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class TimeType(Enum):
    MODIFIED = "modified"
    ACCESSED = "accessed"
    CREATED = "created"

    @property
    def header(self) -> str:
        return f"Date {self.value.capitalize()}"


class TimeStyle(Enum):
    DEFAULT = "default"
    ISO = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"


def timestamp_for(record: FileRecord, time_type: TimeType) -> float | None:
    if time_type is TimeType.ACCESSED:
        return record.timestamps.accessed
    if time_type is TimeType.CREATED:
        return record.timestamps.created
    return record.timestamps.modified


def _default(moment: datetime, current_year: int) -> str:
    month = MONTH_NAMES[moment.month - 1]
    if moment.year == current_year:
        return f"{moment.day:>2} {month} {moment:%H:%M}"
    return f"{moment.day:>2} {month}  {moment.year}"


def _iso(moment: datetime, current_year: int) -> str:
    if moment.year == current_year:
        return moment.strftime("%m-%d %H:%M")
    return moment.strftime("%Y-%m-%d")


def format_time(
    timestamp: float,
    style: TimeStyle = TimeStyle.DEFAULT,
    *,
    current_year: int | None = None,
    tz: tzinfo | None = None,
) -> str:
    """Format ``timestamp`` in local time (or ``tz``) under ``style``.

    The default and iso styles show the time of day for this year's
    timestamps and the year for anything older.
    """
    moment = datetime.fromtimestamp(timestamp, tz).astimezone(tz)
    if current_year is None:
        current_year = datetime.now(tz).year

    if style is TimeStyle.ISO:
        return _iso(moment, current_year)
    if style is TimeStyle.LONG_ISO:
        return moment.strftime("%Y-%m-%d %H:%M")
    if style is TimeStyle.FULL_ISO:
        return moment.strftime("%Y-%m-%d %H:%M:%S.%f %z")
    return _default(moment, current_year)


__all__ = [
    "MONTH_NAMES",
    "TimeStyle",
    "TimeType",
    "format_time",
    "timestamp_for",
]
