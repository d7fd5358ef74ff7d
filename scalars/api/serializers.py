# scalars/api/serializers.py
from __future__ import annotations

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from scalars.services.codec import ISO8601DateTimeCodec
from scalars.services.precision_policy import CodecConfig


class ISO8601DateTimeField(serializers.Field):
    """
    DRF field for the ISO 8601 datetime scalar.

    Output goes through the codec's encode(); an EncodingError is left to
    propagate so the view answers with a server error. Input goes through
    decode(); a string that is not ISO 8601 becomes a regular 400 validation
    error on this field.

    Pass ``precision=`` to pin the digit count for this field instead of
    following the process-wide policy.
    """
    default_error_messages = {
        "invalid": _("Datetime has wrong format. Expected an ISO 8601 string."),
    }

    def __init__(self, *, precision=None, **kwargs):
        config = CodecConfig(precision=precision) if precision is not None else None
        self.codec = ISO8601DateTimeCodec(config)
        super().__init__(**kwargs)

    def to_representation(self, value):
        return self.codec.encode(value)

    def to_internal_value(self, data):
        value = self.codec.decode(data)
        if value is None:
            self.fail("invalid")
        return value


class DeliveryWindowSerializer(serializers.Serializer):
    label = serializers.CharField(max_length=100, required=False, allow_blank=True)
    starts_at = ISO8601DateTimeField()
    ends_at = ISO8601DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        starts_at = attrs.get("starts_at")
        ends_at = attrs.get("ends_at")
        if starts_at and ends_at and ends_at < starts_at:
            raise serializers.ValidationError("ends_at must not precede starts_at")
        return attrs
