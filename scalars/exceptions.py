# scalars/exceptions.py
from __future__ import annotations

from typing import Any


class EncodingError(Exception):
    """
    A server-side value could not be serialized to the wire format.

    Raised for unsupported value types, malformed strings and failing
    foreign formatters alike. It signals bad data produced by the server,
    not bad client input, so callers should let it surface as a fault.
    """

    def __init__(self, value: Any, original: BaseException, codec_name: str) -> None:
        self.value_type = type(value)
        self.original = original
        super().__init__(
            f"An incompatible object ({self.value_type.__name__}) was given to {codec_name}. "
            "Make sure that only Dates, DateTimes, and well-formatted Strings are used "
            f"with this type. ({original})"
        )


__all__ = ["EncodingError"]
