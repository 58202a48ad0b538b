"""
Django settings for the hangman backend.

Only what the gameplay app needs: no database-backed apps are used, state is
held in memory for the lifetime of a session.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "hangman.apps.HangmanConfig",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True
TIME_ZONE = "UTC"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

HANGMAN = {
    "MAX_MISTAKES": 6,
    "STARTING_COINS": {"easy": 3, "medium": 2, "hard": 1},
    "HINT_DELAY_SECS": 1.0,
    "HINT_DISPLAY_SECS": 3.0,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "hangman": {
            "handlers": ["console"],
            "level": os.environ.get("HANGMAN_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
