# scalars/__init__.py

from .exceptions import EncodingError
from .services.codec import ISO8601DateTimeCodec, decode, encode
from .services.precision_policy import (
    DEFAULT_TIME_PRECISION,
    CodecConfig,
    get_precision,
    set_precision,
)
from .typing import SupportsISO8601, TemporalInput

__all__ = [
    "EncodingError",
    "ISO8601DateTimeCodec", "encode", "decode",
    "CodecConfig", "DEFAULT_TIME_PRECISION", "get_precision", "set_precision",
    "SupportsISO8601", "TemporalInput",
]
