"""
School license domain entity.

This is the core domain entity representing a school's license record.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from core.domain.timestamps import as_utc


@dataclass(frozen=True)
class SchoolLicense:
    """
    School license domain entity.

    One mutable record per school lives in the store; this entity is an
    immutable snapshot of it. Only ``expiry_date`` and ``is_active`` are
    ever changed by the service.
    """

    id: str
    school_code: str
    expiry_date: Optional[datetime]
    is_active: bool

    def __post_init__(self):
        """Validate license entity."""
        if not self.id:
            raise ValueError("License record ID is required")
        if not self.school_code:
            raise ValueError("School code is required")
        if self.expiry_date is not None:
            object.__setattr__(self, "expiry_date", as_utc(self.expiry_date))

    def is_expired(self, current_time: datetime) -> bool:
        """
        Check if the license has run out.

        Args:
            current_time: Reference time

        Returns:
            True if there is no expiry date or it is not after current_time
        """
        if self.expiry_date is None:
            return True
        return self.expiry_date <= as_utc(current_time)

    def extend(self, new_expiry: datetime) -> "SchoolLicense":
        """
        Create a new SchoolLicense with the given expiry, marked active.

        Args:
            new_expiry: New expiry datetime

        Returns:
            New SchoolLicense instance
        """
        new_expiry = as_utc(new_expiry)
        if self.expiry_date is not None and new_expiry < self.expiry_date:
            raise ValueError("Extension cannot shorten the current expiry")
        return replace(self, expiry_date=new_expiry, is_active=True)
