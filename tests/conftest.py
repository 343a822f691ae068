"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

from licenses.domain.license import SchoolLicense
from licenses.ports.school_license_repository import SchoolLicenseRepository

FIXED_NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


class InMemorySchoolLicenseRepository(SchoolLicenseRepository):
    """Dict-backed repository recording every call."""

    def __init__(self, licenses: Optional[List[SchoolLicense]] = None):
        self.licenses: Dict[str, SchoolLicense] = {
            license.school_code: license for license in licenses or []
        }
        self.lookups: List[str] = []
        self.updates: List[SchoolLicense] = []

    async def find_by_school_code(self, school_code: str) -> Optional[SchoolLicense]:
        self.lookups.append(school_code)
        return self.licenses.get(school_code)

    async def update(self, license: SchoolLicense) -> SchoolLicense:
        self.updates.append(license)
        self.licenses[license.school_code] = replace(license)
        return license


@pytest.fixture
def fixed_now():
    """Fixture for the reference time used by calculator tests."""
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    """Fixture for a clock frozen at fixed_now."""
    return lambda: fixed_now


@pytest.fixture
def sample_license(fixed_now):
    """Fixture for a SchoolLicense expiring five months after fixed_now."""
    return SchoolLicense(
        id="doc-1",
        school_code="GRA-001",
        expiry_date=datetime(2025, 6, 1, tzinfo=timezone.utc),
        is_active=True,
    )


@pytest.fixture
def expired_license():
    """Fixture for a SchoolLicense that expired a year before fixed_now."""
    return SchoolLicense(
        id="doc-2",
        school_code="OLD-002",
        expiry_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        is_active=False,
    )


@pytest.fixture
def memory_repository(sample_license, expired_license):
    """Fixture for an in-memory repository holding two schools."""
    return InMemorySchoolLicenseRepository([sample_license, expired_license])


@pytest.fixture
def school_license_repository():
    """Fixture for the Django SchoolLicenseRepository."""
    from licenses.infrastructure.repositories.django_school_license_repository import (
        DjangoSchoolLicenseRepository,
    )

    return DjangoSchoolLicenseRepository()


@pytest.fixture
def db_school_license(db):
    """Fixture for a SchoolLicense row expiring in 30 days."""
    from django.utils import timezone as django_timezone

    from licenses.infrastructure.models import SchoolLicense as SchoolLicenseModel

    return SchoolLicenseModel.objects.create(
        school_code="DB-100",
        school_name="Greenfield Academy",
        expiry_date=django_timezone.now() + timedelta(days=30),
        is_active=True,
    )


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
