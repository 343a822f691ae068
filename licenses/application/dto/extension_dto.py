"""
License extension DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.timestamps import format_timestamp
from core.domain.value_objects import PlanTier


@dataclass
class LicenseExtensionDTO:
    """DTO for the outcome of a license extension."""

    school_code: str
    previous_expiry: Optional[datetime]
    new_expiry: datetime
    tier: PlanTier

    def to_response(self) -> dict:
        """Render as the webhook response body."""
        return {
            "success": True,
            "school": self.school_code,
            "expiry": format_timestamp(self.new_expiry),
            "plan": self.tier.value,
        }
