# scalars/services/codec.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from scalars.exceptions import EncodingError
from scalars.services.precision_policy import CodecConfig, get_precision_policy
from scalars.typing import SupportsISO8601, TemporalInput
from scalars.utils.iso8601 import format_iso8601, parse_iso8601, start_of_day_utc

logger = logging.getLogger(__name__)


class ISO8601DateTimeCodec:
    """
    Coerces temporal values to and from ISO 8601 wire strings.

    Without a config the codec follows the process-wide PrecisionPolicy on
    every call; with one it is pinned to that precision.

      encode(): datetime / date / str / SupportsISO8601 -> str,
                raises EncodingError on anything it cannot serialize
      decode(): str -> tz-aware datetime, or None when the string is not
                a valid ISO 8601 date-time
    """
    description = "An ISO 8601-encoded datetime"

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        self._config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}(precision={self.precision})"

    @property
    def precision(self) -> int:
        if self._config is not None:
            return self._config.precision
        return get_precision_policy().get()

    def with_precision(self, precision: int) -> "ISO8601DateTimeCodec":
        return type(self)(CodecConfig(precision=precision))

    # ------- wire <- internal -------
    def encode(self, value: TemporalInput) -> str:
        precision = self.precision
        try:
            return self._coerce_result(value, precision)
        except Exception as exc:
            logger.error("Failed to encode %s as ISO 8601: %s",
                         type(value).__name__, exc)
            raise EncodingError(value, exc, type(self).__name__) from exc

    def _coerce_result(self, value: Any, precision: int) -> str:
        if isinstance(value, datetime):
            return format_iso8601(value, precision)
        if isinstance(value, date):
            return format_iso8601(start_of_day_utc(value), precision)
        if isinstance(value, str):
            return format_iso8601(parse_iso8601(value), precision)
        if isinstance(value, SupportsISO8601):
            # foreign temporal types format themselves
            return value.iso8601(precision)
        raise TypeError(f"Unsupported temporal value: {value!r}")

    # ------- wire -> internal -------
    def decode(self, value: Any) -> Optional[datetime]:
        if not isinstance(value, str):
            logger.debug("Rejected non-string datetime input of type %s",
                         type(value).__name__)
            return None
        try:
            return parse_iso8601(value)
        except ValueError:
            logger.debug("Rejected invalid ISO 8601 input %r", value)
            return None


default_codec = ISO8601DateTimeCodec()


def encode(value: TemporalInput) -> str:
    return default_codec.encode(value)


def decode(value: Any) -> Optional[datetime]:
    return default_codec.decode(value)


__all__ = [
    "ISO8601DateTimeCodec",
    "default_codec",
    "encode",
    "decode",
]
