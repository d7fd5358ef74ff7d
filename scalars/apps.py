# scalars/apps.py
from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class ScalarsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "scalars"
    verbose_name = "API scalars"

    def ready(self):
        from scalars.services.precision_policy import (
            DEFAULT_TIME_PRECISION,
            set_precision,
        )

        raw = getattr(settings, "ISO8601_TIME_PRECISION", DEFAULT_TIME_PRECISION)
        try:
            precision = int(raw.strip()) if isinstance(raw, str) else raw
            set_precision(precision)
        except ValueError as e:
            raise ImproperlyConfigured(
                f"ISO8601_TIME_PRECISION must be a non-negative integer, got {raw!r}"
            ) from e
