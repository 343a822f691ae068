"""
License domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from core.domain.timestamps import add_months, as_utc
from core.domain.value_objects import PlanTier

SESSIONAL_THRESHOLD = Decimal("50000")
TERMLY_THRESHOLD = Decimal("20000")


class LicenseExtensionCalculator:
    """Domain service turning a payment into a new license expiry."""

    @staticmethod
    def classify(amount_paid: Optional[Decimal]) -> PlanTier:
        """
        Classify a payment amount into a plan tier.

        Thresholds are checked from the highest down; an unknown amount
        falls through to the minimum tier.

        Args:
            amount_paid: Amount paid, or None if unknown

        Returns:
            PlanTier for the amount
        """
        if amount_paid is None:
            return PlanTier.MINIMUM
        if amount_paid >= SESSIONAL_THRESHOLD:
            return PlanTier.SESSIONAL
        if amount_paid >= TERMLY_THRESHOLD:
            return PlanTier.TERMLY
        return PlanTier.MINIMUM

    @staticmethod
    def base_date(current_expiry: Optional[datetime], now: datetime) -> datetime:
        """
        Pick the date an extension starts from.

        Renewing early keeps the remaining paid days, so a future expiry
        wins over now.

        Args:
            current_expiry: Stored expiry, or None if the record has none
            now: Current time

        Returns:
            The later of current_expiry and now
        """
        now = as_utc(now)
        if current_expiry is not None and as_utc(current_expiry) > now:
            return as_utc(current_expiry)
        return now

    @classmethod
    def compute_new_expiry(
        cls,
        current_expiry: Optional[datetime],
        now: datetime,
        amount_paid: Optional[Decimal],
    ) -> datetime:
        """
        Compute the expiry a payment extends a license to.

        Args:
            current_expiry: Stored expiry, or None
            now: Current time
            amount_paid: Amount paid, or None if unknown

        Returns:
            New expiry as an aware UTC datetime
        """
        tier = cls.classify(amount_paid)
        return add_months(cls.base_date(current_expiry, now), tier.extension_months)
