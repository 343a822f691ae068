"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error body has the shape ``{"success": false, "message": ...}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    LicenseStoreError,
    SchoolNotFoundError,
    UnauthorizedWebhookError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def error_response(message: str, status_code: int, code: Optional[str] = None) -> Response:
    """Build an error response in the webhook contract shape."""
    body = {"success": False, "message": message}
    if code:
        body["code"] = code
    return Response(body, status=status_code)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc)

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is not None:
            detail = response.data.get("detail") if isinstance(response.data, dict) else None
            response.data = {
                "success": False,
                "message": str(detail or exc.default_detail),
                "code": str(exc.default_code).upper(),
            }
            return response

    if isinstance(exc, Http404):
        return error_response("Resource not found", status.HTTP_404_NOT_FOUND, "NOT_FOUND")

    return _handle_unexpected_exception(exc)


def _handle_domain_exception(exc: DomainException) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, SchoolNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, UnauthorizedWebhookError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, LicenseStoreError):
        logger.error("License store failure: %s", exc.message)
        return error_response(
            INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR, exc.code
        )

    logger.warning("Domain exception: %s - %s", exc.code, exc.message)
    return error_response(exc.message, status_code, exc.code)


def _handle_unexpected_exception(exc: Exception) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("System Error: %s", exc, exc_info=True)
    return error_response(
        INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"
    )
