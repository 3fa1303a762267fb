"""
Test settings for the marketing plan backend.

Runs against SQLite with a fast password hasher and throttling disabled so
the pytest suite needs no external services.  Set
`TEST_DATABASE=postgresql` to run against the Postgres database from the
base settings instead; the threaded like-toggle test only runs there.
"""
import os

from .base import *  # noqa

DEBUG = False

if os.getenv("TEST_DATABASE", "sqlite") != "postgresql":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "test.sqlite3",
        }
    }

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": [],
}
