"""
Test settings for SchoolLicenseService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

# Use in-memory SQLite for tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LICENSE_STORE = {
    "BACKEND": "django",
    "WEBHOOK_SECRET_HASH": "test-secret-hash",
    "TIMEOUT_SECONDS": "5",
}

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable logging during tests
LOGGING_CONFIG = None
