"""
SchoolLicense model.
"""
import uuid

from django.db import models
from django.utils import timezone


class SchoolLicense(models.Model):
    """
    The license record of one school.

    Records are created by administrators; the webhook only moves the
    expiry date forward and re-activates the license.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    school_code = models.CharField(max_length=64, unique=True, db_index=True)
    school_name = models.CharField(max_length=255, blank=True)
    expiry_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "school_licenses"
        ordering = ["school_code"]
        indexes = [
            models.Index(fields=["is_active", "expiry_date"], name="school_lic_active_expiry_idx"),
        ]

    def __str__(self):
        return self.school_code

    @property
    def is_current(self) -> bool:
        """
        Check if the license is active and not past its expiry.

        Returns:
            True if the school can use the software now
        """
        if not self.is_active or self.expiry_date is None:
            return False
        return self.expiry_date > timezone.now()
