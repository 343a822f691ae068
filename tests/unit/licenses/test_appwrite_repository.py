"""
Unit tests for AppwriteSchoolLicenseRepository.
"""
import json
from datetime import datetime, timezone
from unittest import mock

import pytest
import requests
from asgiref.sync import async_to_sync

from core.config import LicenseServiceConfig
from core.domain.exceptions import LicenseStoreError
from licenses.domain.license import SchoolLicense
from licenses.infrastructure.repositories.appwrite_school_license_repository import (
    AppwriteSchoolLicenseRepository,
)

DOCUMENTS_URL = "https://cloud.appwrite.io/v1/databases/db-main/collections/licenses/documents"


@pytest.fixture
def config():
    """Fixture for Appwrite configuration."""
    return LicenseServiceConfig(
        backend="appwrite",
        endpoint="https://cloud.appwrite.io/v1/",
        project_id="assessify",
        api_key="server-key",
        database_id="db-main",
        collection_id="licenses",
        timeout_seconds=5,
    )


@pytest.fixture
def session():
    """Fixture for a mocked requests session."""
    session = mock.MagicMock()
    session.headers = {}
    return session


def json_response(body):
    response = mock.MagicMock()
    response.json.return_value = body
    return response


class TestAppwriteSchoolLicenseRepository:
    """Tests for AppwriteSchoolLicenseRepository."""

    def test_sets_auth_headers(self, config, session):
        """Test project and key headers are set on the session."""
        AppwriteSchoolLicenseRepository(config, session=session)

        assert session.headers["X-Appwrite-Project"] == "assessify"
        assert session.headers["X-Appwrite-Key"] == "server-key"

    def test_missing_configuration(self, session):
        """Test the adapter refuses to start without connection details."""
        with pytest.raises(ValueError, match="database_id, collection_id"):
            AppwriteSchoolLicenseRepository(
                LicenseServiceConfig(
                    backend="appwrite",
                    endpoint="https://cloud.appwrite.io/v1",
                    project_id="p",
                    api_key="k",
                ),
                session=session,
            )

    def test_find_by_school_code(self, config, session):
        """Test a matching document is converted to an entity."""
        session.request.return_value = json_response(
            {
                "total": 1,
                "documents": [
                    {
                        "$id": "65f0c1",
                        "schoolCode": "GRA-001",
                        "expiryDate": "2025-06-01T00:00:00.000+00:00",
                        "isActive": True,
                    }
                ],
            }
        )
        repository = AppwriteSchoolLicenseRepository(config, session=session)

        license = async_to_sync(repository.find_by_school_code)("GRA-001")

        assert license == SchoolLicense(
            id="65f0c1",
            school_code="GRA-001",
            expiry_date=datetime(2025, 6, 1, tzinfo=timezone.utc),
            is_active=True,
        )
        args, kwargs = session.request.call_args
        assert args == ("GET", DOCUMENTS_URL)
        assert kwargs["timeout"] == 5
        queries = [json.loads(query) for query in kwargs["params"]["queries[]"]]
        assert queries[0] == {
            "method": "equal",
            "attribute": "schoolCode",
            "values": ["GRA-001"],
        }

    def test_find_no_match(self, config, session):
        """Test an empty result set yields None."""
        session.request.return_value = json_response({"total": 0, "documents": []})
        repository = AppwriteSchoolLicenseRepository(config, session=session)

        assert async_to_sync(repository.find_by_school_code)("MISSING-9") is None

    def test_update(self, config, session):
        """Test the expiry and active flag are patched onto the document."""
        session.request.return_value = json_response(
            {
                "$id": "65f0c1",
                "schoolCode": "GRA-001",
                "expiryDate": "2025-10-01T00:00:00.000+00:00",
                "isActive": True,
            }
        )
        repository = AppwriteSchoolLicenseRepository(config, session=session)
        license = SchoolLicense(
            id="65f0c1",
            school_code="GRA-001",
            expiry_date=datetime(2025, 10, 1, tzinfo=timezone.utc),
            is_active=True,
        )

        updated = async_to_sync(repository.update)(license)

        assert updated.expiry_date == datetime(2025, 10, 1, tzinfo=timezone.utc)
        args, kwargs = session.request.call_args
        assert args == ("PATCH", f"{DOCUMENTS_URL}/65f0c1")
        assert kwargs["json"] == {
            "data": {"expiryDate": "2025-10-01T00:00:00.000Z", "isActive": True}
        }

    def test_http_error_becomes_store_error(self, config, session):
        """Test transport failures surface as LicenseStoreError."""
        response = json_response({})
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("401 Client Error")
        session.request.return_value = response
        repository = AppwriteSchoolLicenseRepository(config, session=session)

        with pytest.raises(LicenseStoreError, match="401 Client Error"):
            async_to_sync(repository.find_by_school_code)("GRA-001")

    def test_timeout_becomes_store_error(self, config, session):
        """Test a timeout surfaces as LicenseStoreError."""
        session.request.side_effect = requests.exceptions.Timeout("timed out")
        repository = AppwriteSchoolLicenseRepository(config, session=session)

        with pytest.raises(LicenseStoreError):
            async_to_sync(repository.find_by_school_code)("GRA-001")

    def test_invalid_json_becomes_store_error(self, config, session):
        """Test a non-JSON body surfaces as LicenseStoreError."""
        response = mock.MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        session.request.return_value = response
        repository = AppwriteSchoolLicenseRepository(config, session=session)

        with pytest.raises(LicenseStoreError, match="invalid response"):
            async_to_sync(repository.find_by_school_code)("GRA-001")
