"""
ExtendLicenseCommand.

Command to extend a school's license after a payment.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.domain.value_objects import RequestOrigin


@dataclass
class ExtendLicenseCommand:
    """Command to extend a school's license by the tier its payment buys."""

    school_code: str
    amount_paid: Optional[Decimal]
    origin: RequestOrigin
    transaction_reference: Optional[str] = None
