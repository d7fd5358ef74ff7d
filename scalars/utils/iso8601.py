# scalars/utils/iso8601.py
from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from typing import Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

__all__ = [
    "parse_iso8601",
    "format_iso8601",
    "format_offset",
    "start_of_day_utc",
]

# Extended format only, upper-case T/Z, no surrounding whitespace.
# parse_datetime alone would also take a space separator and whatever
# datetime.fromisoformat accepts on the running interpreter.
_ISO8601_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:T(?:[01]\d|2[0-3]):\d{2}(?::\d{2}(?:[.,]\d+)?)?"
    r"(?:Z|[+-](?:[01]\d|2[0-3])(?::?[0-5]\d)?)?)?",
    re.ASCII,
)


def parse_iso8601(value: str) -> datetime:
    """
    Strict ISO 8601 parse into a tz-aware datetime.

    Accepts extended date-times (``2021-06-01T12:30:45.5+02:00``) and bare
    calendar dates, which become 00:00:00 UTC. Seconds and offset are
    optional; a missing offset means UTC and a present one is kept.

    Raises ValueError for anything that is not a well-formed, in-range
    date or date-time.
    """
    if not _ISO8601_RE.fullmatch(value):
        raise ValueError(f"Invalid ISO 8601 datetime: {value!r}")

    if "T" not in value:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"Invalid ISO 8601 datetime: {value!r}")
        return start_of_day_utc(day)

    when = parse_datetime(value)
    if when is None:
        raise ValueError(f"Invalid ISO 8601 datetime: {value!r}")
    if timezone.is_naive(when):
        when = timezone.make_aware(when, dt_timezone.utc)
    return when


def start_of_day_utc(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=dt_timezone.utc)


def format_offset(offset: Optional[timedelta]) -> str:
    if not offset:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    total = int(abs(offset).total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def format_iso8601(dt: datetime, precision: int) -> str:
    """
    Render ``dt`` as an ISO 8601 extended date-time with exactly
    ``precision`` fractional-second digits and an explicit offset.

    Sub-second values are truncated, never rounded up, so the rendered
    instant never lies after ``dt``.
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError(f"Precision must be a non-negative integer, got {precision!r}")

    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt, dt_timezone.utc)
    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if precision:
        micros = f"{dt.microsecond:06d}"
        text += "." + micros[:precision].ljust(precision, "0")
    return text + format_offset(dt.utcoffset())
