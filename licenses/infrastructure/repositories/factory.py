"""
Repository selection.
"""
from core.config import STORE_BACKEND_APPWRITE, LicenseServiceConfig
from licenses.ports.school_license_repository import SchoolLicenseRepository


def build_school_license_repository(config: LicenseServiceConfig) -> SchoolLicenseRepository:
    """
    Build the repository for the configured store backend.

    Args:
        config: Service configuration

    Returns:
        SchoolLicenseRepository implementation
    """
    if config.backend == STORE_BACKEND_APPWRITE:
        from licenses.infrastructure.repositories.appwrite_school_license_repository import (
            AppwriteSchoolLicenseRepository,
        )

        return AppwriteSchoolLicenseRepository(config)

    from licenses.infrastructure.repositories.django_school_license_repository import (
        DjangoSchoolLicenseRepository,
    )

    return DjangoSchoolLicenseRepository()
