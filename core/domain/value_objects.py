"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

WEBHOOK_SIGNATURE_HEADER = "verif-hash"


class PlanTier(Enum):
    """Pricing plan a payment amount falls into."""

    SESSIONAL = "sessional"
    TERMLY = "termly"
    MINIMUM = "minimum"

    @property
    def extension_months(self) -> int:
        """Number of calendar months a payment in this tier buys."""
        return _TIER_MONTHS[self]

    def __str__(self) -> str:
        """Return tier as string."""
        return self.value


_TIER_MONTHS = {
    PlanTier.SESSIONAL: 12,
    PlanTier.TERMLY: 4,
    PlanTier.MINIMUM: 1,
}


class RequestOrigin(Enum):
    """Where a license extension request came from."""

    WEBHOOK = "webhook"
    MANUAL = "manual"

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RequestOrigin":
        """
        Resolve the origin of a request from its headers.

        Payment gateway calls always carry the signature header; its
        absence marks a manual trigger from an internal caller.

        Args:
            headers: Case-insensitive request headers

        Returns:
            WEBHOOK if the signature header is present, MANUAL otherwise
        """
        if headers.get(WEBHOOK_SIGNATURE_HEADER) is not None:
            return cls.WEBHOOK
        return cls.MANUAL

    def __str__(self) -> str:
        """Return origin as string."""
        return self.value


@dataclass(frozen=True)
class SchoolCode:
    """School code value object."""

    value: str

    def __post_init__(self):
        """Validate school code."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("School code cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        """Return school code as string."""
        return self.value
