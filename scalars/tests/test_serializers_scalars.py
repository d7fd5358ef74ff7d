# scalars/tests/test_serializers_scalars.py
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Mapping

import pytest
from rest_framework import serializers

from scalars import EncodingError
from scalars.api.serializers import DeliveryWindowSerializer, ISO8601DateTimeField

UTC = timezone.utc


def test_ingest_parses_iso8601_strings():
    ser = DeliveryWindowSerializer(data={
        "label": "morning",
        "starts_at": "2021-06-01T08:00:00Z",
        "ends_at": "2021-06-01T12:30:00+02:00",
    })
    assert ser.is_valid(), ser.errors

    raw = ser.validated_data
    assert isinstance(raw, Mapping)
    v: Dict[str, Any] = dict(raw)

    assert v["starts_at"] == datetime(2021, 6, 1, 8, 0, tzinfo=UTC)
    assert v["ends_at"].utcoffset() == timedelta(hours=2)


def test_invalid_string_is_a_field_validation_error():
    ser = DeliveryWindowSerializer(data={"starts_at": "yesterday-ish"})
    assert not ser.is_valid()
    assert "starts_at" in ser.errors
    assert "ISO 8601" in str(ser.errors["starts_at"][0])


def test_non_string_input_is_rejected():
    ser = DeliveryWindowSerializer(data={"starts_at": 1622550645})
    assert not ser.is_valid()
    assert "starts_at" in ser.errors


def test_null_allowed_only_where_declared():
    ok = DeliveryWindowSerializer(data={"starts_at": "2021-06-01T08:00:00Z", "ends_at": None})
    assert ok.is_valid(), ok.errors
    assert ok.validated_data["ends_at"] is None

    bad = DeliveryWindowSerializer(data={"starts_at": None})
    assert not bad.is_valid()
    assert "starts_at" in bad.errors


def test_window_order_is_validated():
    ser = DeliveryWindowSerializer(data={
        "starts_at": "2021-06-01T12:00:00Z",
        "ends_at": "2021-06-01T13:00:00+02:00",
    })
    assert not ser.is_valid()
    assert "ends_at must not precede starts_at" in str(ser.errors)


def test_output_uses_process_wide_precision(precision):
    instance = {
        "label": "lunch",
        "starts_at": datetime(2021, 6, 1, 12, 30, 45, 500000, tzinfo=UTC),
        "ends_at": date(2021, 6, 2),
    }
    assert DeliveryWindowSerializer(instance).data == {
        "label": "lunch",
        "starts_at": "2021-06-01T12:30:45Z",
        "ends_at": "2021-06-02T00:00:00Z",
    }

    precision(3)
    data = DeliveryWindowSerializer(instance).data
    assert data["starts_at"] == "2021-06-01T12:30:45.500Z"
    assert data["ends_at"] == "2021-06-02T00:00:00.000Z"


def test_output_none_stays_none():
    data = DeliveryWindowSerializer({"starts_at": "2021-06-01T08:00:00Z", "ends_at": None}).data
    assert data["starts_at"] == "2021-06-01T08:00:00Z"
    assert data["ends_at"] is None


def test_bad_server_value_raises_encoding_error():
    with pytest.raises(EncodingError) as excinfo:
        DeliveryWindowSerializer({"starts_at": 12.5}).data
    assert "float" in str(excinfo.value)


def test_pinned_field_precision(precision):
    class AuditSerializer(serializers.Serializer):
        logged_at = ISO8601DateTimeField(precision=6)

    precision(1)
    data = AuditSerializer({"logged_at": datetime(2021, 6, 1, 12, 30, 45, 123456, tzinfo=UTC)}).data
    assert data["logged_at"] == "2021-06-01T12:30:45.123456Z"


def test_negative_field_precision_rejected():
    with pytest.raises(ValueError):
        ISO8601DateTimeField(precision=-2)
