# scalars/adapters.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from scalars.utils.iso8601 import format_iso8601


@dataclass(frozen=True)
class UnixTimestamp:
    """Seconds since the epoch, as reported by telemetry feeds."""
    seconds: float

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds, tz=timezone.utc)

    def iso8601(self, precision: int) -> str:
        return format_iso8601(self.to_datetime(), precision)


__all__ = ["UnixTimestamp"]
