"""
Integration tests for the Django school license repository.
"""
from datetime import datetime, timedelta, timezone

import pytest
from asgiref.sync import async_to_sync

from licenses.infrastructure.models import SchoolLicense as SchoolLicenseModel


@pytest.mark.django_db
@pytest.mark.integration
class TestDjangoSchoolLicenseRepository:
    """Integration tests for DjangoSchoolLicenseRepository."""

    def test_find_by_school_code(self, school_license_repository, db_school_license):
        """Test a stored record is returned as an entity."""
        license = async_to_sync(school_license_repository.find_by_school_code)("DB-100")

        assert license.id == str(db_school_license.id)
        assert license.school_code == "DB-100"
        assert license.expiry_date == db_school_license.expiry_date
        assert license.is_active is True

    def test_find_unknown_school(self, school_license_repository):
        """Test an unknown school code yields None."""
        assert async_to_sync(school_license_repository.find_by_school_code)("NOPE") is None

    def test_update_writes_expiry_and_flag(self, school_license_repository):
        """Test update changes only the expiry date and active flag."""
        SchoolLicenseModel.objects.create(
            school_code="LAPSED-1",
            school_name="Hillside College",
            expiry_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            is_active=False,
        )
        license = async_to_sync(school_license_repository.find_by_school_code)("LAPSED-1")
        new_expiry = datetime.now(timezone.utc) + timedelta(days=120)

        updated = async_to_sync(school_license_repository.update)(license.extend(new_expiry))

        row = SchoolLicenseModel.objects.get(school_code="LAPSED-1")
        assert row.expiry_date == new_expiry
        assert row.is_active is True
        assert row.school_name == "Hillside College"
        assert updated.expiry_date == new_expiry

    def test_is_current(self, db_school_license):
        """Test the model reports an active, unexpired license as current."""
        assert db_school_license.is_current is True

        db_school_license.is_active = False
        assert db_school_license.is_current is False
