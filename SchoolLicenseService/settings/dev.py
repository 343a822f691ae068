"""
Development settings for SchoolLicenseService.
"""

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Email backend for development
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
