"""
Appwrite implementation of SchoolLicenseRepository port.

Talks to an Appwrite Databases collection over its REST API. Each school
is one document with ``schoolCode``, ``expiryDate`` and ``isActive``
attributes.
"""
import json
import logging
from typing import Any, Dict, Optional

import requests
from asgiref.sync import sync_to_async

from core.config import LicenseServiceConfig
from core.domain.exceptions import LicenseStoreError
from core.domain.timestamps import format_timestamp, parse_timestamp
from licenses.domain.license import SchoolLicense
from licenses.ports.school_license_repository import SchoolLicenseRepository

logger = logging.getLogger(__name__)


class AppwriteSchoolLicenseRepository(SchoolLicenseRepository):
    """Appwrite document store implementation of SchoolLicenseRepository."""

    def __init__(self, config: LicenseServiceConfig, session: Optional[requests.Session] = None):
        """
        Initialize repository.

        Args:
            config: Service configuration with Appwrite connection details
            session: Optional requests session (a new one is created if omitted)
        """
        missing = [
            name
            for name in ("endpoint", "project_id", "api_key", "database_id", "collection_id")
            if not getattr(config, name)
        ]
        if missing:
            raise ValueError(f"Appwrite store is missing configuration: {', '.join(missing)}")

        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "X-Appwrite-Project": config.project_id,
                "X-Appwrite-Key": config.api_key,
            }
        )

    @property
    def documents_url(self) -> str:
        """Base URL of the license collection's documents."""
        return (
            f"{self.config.endpoint.rstrip('/')}/databases/{self.config.database_id}"
            f"/collections/{self.config.collection_id}/documents"
        )

    @staticmethod
    def _to_domain(document: Dict[str, Any]) -> SchoolLicense:
        """
        Convert an Appwrite document to a domain entity.

        Args:
            document: Document JSON

        Returns:
            SchoolLicense domain entity
        """
        return SchoolLicense(
            id=document["$id"],
            school_code=document["schoolCode"],
            expiry_date=parse_timestamp(document.get("expiryDate")),
            is_active=bool(document.get("isActive", False)),
        )

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        """Send a request and return its JSON body."""
        try:
            response = self.session.request(
                method, url, timeout=self.config.timeout_seconds, **kwargs
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error("System Error: Appwrite %s %s failed: %s", method, url, e)
            raise LicenseStoreError(f"License store request failed: {e}") from e
        except ValueError as e:
            logger.error("System Error: Appwrite returned invalid JSON: %s", e)
            raise LicenseStoreError("License store returned an invalid response") from e

    @sync_to_async
    def find_by_school_code(self, school_code: str) -> Optional[SchoolLicense]:
        """
        Find the license record for a school.

        Args:
            school_code: School code

        Returns:
            SchoolLicense entity or None if not found
        """
        queries = [
            json.dumps({"method": "equal", "attribute": "schoolCode", "values": [school_code]}),
            json.dumps({"method": "limit", "values": [1]}),
        ]
        body = self._request("GET", self.documents_url, params={"queries[]": queries})
        documents = body.get("documents") or []
        if not body.get("total") or not documents:
            return None
        return self._to_domain(documents[0])

    @sync_to_async
    def update(self, license: SchoolLicense) -> SchoolLicense:
        """
        Write the expiry date and active flag of an existing document.

        Args:
            license: SchoolLicense entity carrying the new values

        Returns:
            Updated SchoolLicense entity
        """
        data = {
            "expiryDate": format_timestamp(license.expiry_date),
            "isActive": license.is_active,
        }
        document = self._request(
            "PATCH", f"{self.documents_url}/{license.id}", json={"data": data}
        )
        return self._to_domain(document)
