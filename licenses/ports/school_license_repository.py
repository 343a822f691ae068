"""
School license repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licenses.domain.license import SchoolLicense


class SchoolLicenseRepository(ABC):
    """
    Abstract repository for SchoolLicense entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.

    Lookup and update are separate round trips with no version check,
    so two concurrent extensions of the same school can lose an update.
    """

    @abstractmethod
    async def find_by_school_code(self, school_code: str) -> Optional[SchoolLicense]:
        """
        Find the license record for a school.

        Args:
            school_code: School code

        Returns:
            SchoolLicense entity or None if not found
        """
        pass

    @abstractmethod
    async def update(self, license: SchoolLicense) -> SchoolLicense:
        """
        Write the expiry date and active flag of an existing record.

        Args:
            license: SchoolLicense entity carrying the new values

        Returns:
            Updated SchoolLicense entity
        """
        pass
