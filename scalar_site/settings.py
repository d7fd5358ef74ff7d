# scalar_site/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

# ------------------------------
# Base paths & environment
# ------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# ------------------------------
# Core settings
# ------------------------------
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "override-in-.env")
DEBUG = os.getenv("DJANGO_DEBUG", "False").strip().lower() == "true"

ALLOWED_HOSTS = [h.strip() for h in os.getenv(
    "DJANGO_ALLOWED_HOSTS", "").split(",") if h.strip()]
if DEBUG and not ALLOWED_HOSTS:
    ALLOWED_HOSTS = ["127.0.0.1", "localhost"]

# ------------------------------
# Installed apps
# ------------------------------
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",

    "rest_framework",
    "scalars",
]

# ------------------------------
# Database
# ------------------------------
DATABASES = {
    "default": {"ENGINE": "django.db.backends.sqlite3", "NAME": BASE_DIR / "db.sqlite3"}
}

# ------------------------------
# DRF
# ------------------------------
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
}

# ------------------------------
# I18N / Time
# ------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

# Fractional-second digits emitted by the ISO 8601 datetime scalar.
# 0 means whole seconds with no decimal point.
ISO8601_TIME_PRECISION = os.getenv("ISO8601_TIME_PRECISION", "0")

# ------------------------------
# Logging
# ------------------------------
LOG_LEVEL = "DEBUG" if DEBUG else os.getenv("DJANGO_LOG_LEVEL", "INFO")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[{levelname}] {name}: {message}", "style": "{"},
        "verbose": {"format": "{asctime} [{levelname}] {name} ({module}:{lineno}): {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple" if DEBUG else "verbose"}},
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {"scalars": {"level": LOG_LEVEL}},
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
