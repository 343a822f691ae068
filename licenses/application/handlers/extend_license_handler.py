"""
Extend license handler.

Handler for ExtendLicenseCommand: looks up the school's record, works out
the new expiry and writes it back.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from core.domain.exceptions import SchoolNotFoundError
from core.domain.timestamps import format_timestamp, utcnow
from licenses.application.commands.extend_license import ExtendLicenseCommand
from licenses.application.dto.extension_dto import LicenseExtensionDTO
from licenses.domain.services import LicenseExtensionCalculator
from licenses.ports.school_license_repository import SchoolLicenseRepository

logger = logging.getLogger(__name__)


class ExtendLicenseHandler:
    """Handler for ExtendLicenseCommand."""

    def __init__(
        self,
        license_repository: SchoolLicenseRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize handler with repository and an optional clock."""
        self.license_repository = license_repository
        self.clock = clock or utcnow

    async def handle(self, command: ExtendLicenseCommand) -> LicenseExtensionDTO:
        """
        Handle extend license command.

        Every call extends the license again; duplicate deliveries of the
        same payment are not detected.

        Args:
            command: ExtendLicenseCommand

        Returns:
            LicenseExtensionDTO describing the new expiry

        Raises:
            SchoolNotFoundError: If the school has no license record
        """
        license = await self.license_repository.find_by_school_code(command.school_code)
        if not license:
            logger.error(
                "Database Error: No license record found for school: %s",
                command.school_code,
            )
            raise SchoolNotFoundError()

        tier = LicenseExtensionCalculator.classify(command.amount_paid)
        logger.info(
            "Processing %s plan for %s",
            tier.value.upper(),
            command.school_code,
            extra={
                "origin": command.origin.value,
                "transaction_reference": command.transaction_reference,
            },
        )

        now = self.clock()
        if license.is_expired(now):
            logger.info("License for %s has lapsed; extending from now", command.school_code)

        new_expiry = LicenseExtensionCalculator.compute_new_expiry(
            license.expiry_date, now, command.amount_paid
        )
        updated = await self.license_repository.update(license.extend(new_expiry))

        logger.info(
            "SUCCESS: %s license extended to %s",
            command.school_code,
            format_timestamp(updated.expiry_date),
        )

        return LicenseExtensionDTO(
            school_code=command.school_code,
            previous_expiry=license.expiry_date,
            new_expiry=updated.expiry_date,
            tier=tier,
        )
