"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class UnauthorizedWebhookError(DomainException):
    """Raised when a webhook signature is missing or does not match."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class LicenseException(DomainException):
    """Base exception for license-related errors."""

    pass


class MissingSchoolCodeError(LicenseException):
    """Raised when a payload does not identify a school."""

    def __init__(self, message: str = "Missing schoolCode"):
        super().__init__(message, code="MISSING_SCHOOL_CODE")


class SchoolNotFoundError(LicenseException):
    """Raised when no license record exists for a school code."""

    def __init__(self, message: str = "School not found"):
        super().__init__(message, code="SCHOOL_NOT_FOUND")


class LicenseStoreError(LicenseException):
    """Raised when the license store cannot be read or written."""

    def __init__(self, message: str = "License store unavailable"):
        super().__init__(message, code="LICENSE_STORE_ERROR")
