# scalars/pydantic_models.py
from __future__ import annotations

from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Annotated, Any, Dict, Optional

from django.utils import timezone
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from scalars.services.codec import decode, encode


def _validate_iso8601(value: Any) -> datetime:
    if isinstance(value, datetime):
        if timezone.is_naive(value):
            value = timezone.make_aware(value, dt_timezone.utc)
        return value
    parsed = decode(value)
    if parsed is None:
        raise ValueError("Datetime has wrong format. Expected an ISO 8601 string.")
    return parsed


# pydantic wraps exceptions raised by serializers: an EncodingError from
# encode() reaches callers of model_dump_json() as PydanticSerializationError
# (its message embeds the EncodingError text). Validated fields always hold
# aware datetimes, so that only happens for instances built with
# model_construct().
ISO8601DateTime = Annotated[
    datetime,
    PlainValidator(_validate_iso8601),
    PlainSerializer(encode, return_type=str, when_used="json"),
]


class _CamelAliasModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)


class DeliveryWindowModel(_CamelAliasModel):
    label: str = ""
    starts_at: ISO8601DateTime = Field(alias="startsAt")
    ends_at: Optional[ISO8601DateTime] = Field(default=None, alias="endsAt")

    def as_camel_dict(self) -> Dict:
        return self.model_dump(by_alias=True, mode="json")


__all__ = [
    "ISO8601DateTime",
    "DeliveryWindowModel",
]
