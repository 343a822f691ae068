"""
Payment payload normalization.

Gateway notifications and manual triggers carry the school and the amount
in different places; this service maps both onto an ExtendLicenseCommand.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from core.domain.exceptions import MissingSchoolCodeError
from core.domain.value_objects import RequestOrigin, SchoolCode
from licenses.application.commands.extend_license import ExtendLicenseCommand
from licenses.domain.services import SESSIONAL_THRESHOLD, TERMLY_THRESHOLD

logger = logging.getLogger(__name__)

SUCCESSFUL_STATUS = "successful"
SESSIONAL_PLAN = "Sessional"


def coerce_amount(value: Any) -> Optional[Decimal]:
    """
    Convert a payload amount to Decimal.

    Numbers and numeric strings are accepted; anything else is unknown.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount


def amount_for_plan(plan: Any) -> Decimal:
    """Amount implied by a manual plan label."""
    if plan == SESSIONAL_PLAN:
        return SESSIONAL_THRESHOLD
    return TERMLY_THRESHOLD


class PaymentPayloadNormalizer:
    """Maps gateway and manual payloads onto ExtendLicenseCommand."""

    def normalize(
        self, payload: Mapping[str, Any], origin: RequestOrigin
    ) -> Optional[ExtendLicenseCommand]:
        """
        Normalize a request payload.

        Args:
            payload: Parsed JSON body
            origin: Resolved request origin

        Returns:
            ExtendLicenseCommand, or None for a gateway notification whose
            status is not "successful" (nothing to do)

        Raises:
            MissingSchoolCodeError: If no school code can be found
        """
        if origin is RequestOrigin.WEBHOOK:
            return self._normalize_gateway(payload)
        return self._normalize_manual(payload)

    def _normalize_gateway(self, payload: Mapping[str, Any]) -> Optional[ExtendLicenseCommand]:
        status = payload.get("status")
        if status != SUCCESSFUL_STATUS:
            logger.info("Transaction ignored with status: %s", status)
            return None

        meta = payload.get("meta")
        school_code = meta.get("schoolCode") if isinstance(meta, Mapping) else None
        reference = payload.get("tx_ref") or payload.get("id")
        return ExtendLicenseCommand(
            school_code=self._require_school_code(school_code),
            amount_paid=coerce_amount(payload.get("amount")),
            origin=RequestOrigin.WEBHOOK,
            transaction_reference=str(reference) if reference is not None else None,
        )

    def _normalize_manual(self, payload: Mapping[str, Any]) -> ExtendLicenseCommand:
        school_code = self._require_school_code(payload.get("schoolCode"))
        if payload.get("amount") is not None:
            amount = coerce_amount(payload.get("amount"))
        else:
            amount = amount_for_plan(payload.get("plan"))
        return ExtendLicenseCommand(
            school_code=school_code,
            amount_paid=amount,
            origin=RequestOrigin.MANUAL,
        )

    @staticmethod
    def _require_school_code(value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        try:
            return str(SchoolCode(value))
        except ValueError:
            logger.error("Metadata Error: schoolCode is missing from the payload.")
            raise MissingSchoolCodeError() from None
