# scalars/services/precision_policy.py
from __future__ import annotations

import logging
from threading import RLock
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

logger = logging.getLogger(__name__)

DEFAULT_TIME_PRECISION = 0


class CodecConfig(BaseModel):
    """Immutable formatting settings handed to a codec at construction."""
    model_config = ConfigDict(frozen=True)

    precision: StrictInt = Field(default=DEFAULT_TIME_PRECISION, ge=0)


class PrecisionPolicy:
    """
    Singleton-style holder for the process-wide fractional-second precision.
    Provides:
      - get(): current digit count
      - set(): replace it (validated, negative values rejected)
      - reset(): back to DEFAULT_TIME_PRECISION
      - config(): the current value as a CodecConfig snapshot

    Meant to be set once at startup. The lock only keeps a single write
    whole; encodes already in flight may see either value.
    """
    _instance: Optional["PrecisionPolicy"] = None
    _lock = RLock()

    def __new__(cls) -> "PrecisionPolicy":
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._init()
            return cls._instance

    # ------- lifecycle -------
    def _init(self) -> None:
        self._config = CodecConfig()

    # ------- public API -------
    def get(self) -> int:
        return self._config.precision

    def config(self) -> CodecConfig:
        return self._config

    def set(self, precision: int) -> None:
        config = CodecConfig(precision=precision)
        with self._lock:
            previous = self._config.precision
            self._config = config
        if previous != config.precision:
            logger.info("ISO 8601 time precision changed: %d -> %d",
                        previous, config.precision)

    def reset(self) -> None:
        self.set(DEFAULT_TIME_PRECISION)


def get_precision_policy() -> PrecisionPolicy:
    """Factory accessor used by the codec and app startup."""
    return PrecisionPolicy()


def get_precision() -> int:
    return get_precision_policy().get()


def set_precision(precision: int) -> None:
    get_precision_policy().set(precision)
