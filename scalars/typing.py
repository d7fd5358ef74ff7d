# scalars/typing.py
from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class SupportsISO8601(Protocol):
    """Foreign temporal value that can render itself as an ISO 8601 instant."""

    def iso8601(self, precision: int) -> str: ...


# datetime is checked before date: every datetime is also a date.
TemporalInput = Union[datetime, date, str, SupportsISO8601]

__all__ = [
    "SupportsISO8601",
    "TemporalInput",
]
