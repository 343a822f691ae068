"""
Django implementation of SchoolLicenseRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import Optional

from asgiref.sync import sync_to_async

from licenses.domain.license import SchoolLicense
from licenses.infrastructure.models import SchoolLicense as SchoolLicenseModel
from licenses.ports.school_license_repository import SchoolLicenseRepository


class DjangoSchoolLicenseRepository(SchoolLicenseRepository):
    """
    Django ORM implementation of SchoolLicenseRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Writes the two mutable fields back with a targeted UPDATE
    """

    def _to_domain(self, model: SchoolLicenseModel) -> SchoolLicense:
        """
        Convert Django model to domain entity.

        Args:
            model: Django SchoolLicense model

        Returns:
            SchoolLicense domain entity
        """
        return SchoolLicense(
            id=str(model.id),
            school_code=model.school_code,
            expiry_date=model.expiry_date,
            is_active=model.is_active,
        )

    @sync_to_async
    def find_by_school_code(self, school_code: str) -> Optional[SchoolLicense]:
        """
        Find the license record for a school.

        Args:
            school_code: School code

        Returns:
            SchoolLicense entity or None if not found
        """
        model = SchoolLicenseModel.objects.filter(school_code=school_code).first()
        if model is None:
            return None
        return self._to_domain(model)

    @sync_to_async
    def update(self, license: SchoolLicense) -> SchoolLicense:
        """
        Write the expiry date and active flag of an existing record.

        Args:
            license: SchoolLicense entity carrying the new values

        Returns:
            Updated SchoolLicense entity
        """
        model = SchoolLicenseModel.objects.get(id=license.id)
        model.expiry_date = license.expiry_date
        model.is_active = license.is_active
        model.save(update_fields=["expiry_date", "is_active", "updated_at"])
        return self._to_domain(model)
