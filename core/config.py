"""
Service configuration.

Collects the environment-sourced settings the license webhook needs
into one immutable object that is passed to its collaborators.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

STORE_BACKEND_DJANGO = "django"
STORE_BACKEND_APPWRITE = "appwrite"


@dataclass(frozen=True)
class LicenseServiceConfig:
    """Connection details for the license store and the webhook secret."""

    backend: str = STORE_BACKEND_DJANGO
    endpoint: Optional[str] = None
    project_id: Optional[str] = None
    api_key: Optional[str] = None
    database_id: Optional[str] = None
    collection_id: Optional[str] = None
    webhook_secret_hash: Optional[str] = None
    timeout_seconds: float = 10.0

    def __post_init__(self):
        """Validate configuration."""
        if self.backend not in (STORE_BACKEND_DJANGO, STORE_BACKEND_APPWRITE):
            raise ValueError(f"Unknown license store backend: {self.backend}")
        if self.timeout_seconds <= 0:
            raise ValueError("Store timeout must be positive")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "LicenseServiceConfig":
        """
        Build configuration from a LICENSE_STORE style mapping.

        Args:
            values: Mapping with upper-case keys (ENDPOINT, PROJECT_ID, ...)

        Returns:
            LicenseServiceConfig instance
        """
        return cls(
            backend=(values.get("BACKEND") or STORE_BACKEND_DJANGO).lower(),
            endpoint=values.get("ENDPOINT") or None,
            project_id=values.get("PROJECT_ID") or None,
            api_key=values.get("API_KEY") or None,
            database_id=values.get("DATABASE_ID") or None,
            collection_id=values.get("COLLECTION_ID") or None,
            webhook_secret_hash=values.get("WEBHOOK_SECRET_HASH") or None,
            timeout_seconds=float(values.get("TIMEOUT_SECONDS") or 10.0),
        )

    @classmethod
    def from_settings(cls) -> "LicenseServiceConfig":
        """Build configuration from Django settings."""
        from django.conf import settings

        return cls.from_mapping(getattr(settings, "LICENSE_STORE", {}))
