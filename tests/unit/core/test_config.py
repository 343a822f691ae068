"""
Unit tests for LicenseServiceConfig.
"""
import pytest
from django.test import override_settings

from core.config import STORE_BACKEND_APPWRITE, STORE_BACKEND_DJANGO, LicenseServiceConfig


class TestLicenseServiceConfig:
    """Tests for LicenseServiceConfig."""

    def test_from_mapping(self):
        """Test all keys are read from a LICENSE_STORE mapping."""
        config = LicenseServiceConfig.from_mapping(
            {
                "BACKEND": "Appwrite",
                "ENDPOINT": "https://cloud.appwrite.io/v1",
                "PROJECT_ID": "proj",
                "API_KEY": "key",
                "DATABASE_ID": "db",
                "COLLECTION_ID": "licenses",
                "WEBHOOK_SECRET_HASH": "secret",
                "TIMEOUT_SECONDS": "2.5",
            }
        )

        assert config.backend == STORE_BACKEND_APPWRITE
        assert config.endpoint == "https://cloud.appwrite.io/v1"
        assert config.collection_id == "licenses"
        assert config.webhook_secret_hash == "secret"
        assert config.timeout_seconds == 2.5

    def test_empty_values_become_none(self):
        """Test blank environment values are treated as unset."""
        config = LicenseServiceConfig.from_mapping({"BACKEND": "", "WEBHOOK_SECRET_HASH": ""})

        assert config.backend == STORE_BACKEND_DJANGO
        assert config.webhook_secret_hash is None
        assert config.timeout_seconds == 10.0

    def test_unknown_backend(self):
        """Test an unknown backend is rejected."""
        with pytest.raises(ValueError, match="Unknown license store backend"):
            LicenseServiceConfig(backend="mongo")

    def test_non_positive_timeout(self):
        """Test the store timeout must be positive."""
        with pytest.raises(ValueError, match="timeout must be positive"):
            LicenseServiceConfig(timeout_seconds=0)

    @override_settings(LICENSE_STORE={"BACKEND": "django", "WEBHOOK_SECRET_HASH": "from-settings"})
    def test_from_settings(self):
        """Test configuration is read from Django settings."""
        config = LicenseServiceConfig.from_settings()

        assert config.backend == STORE_BACKEND_DJANGO
        assert config.webhook_secret_hash == "from-settings"
