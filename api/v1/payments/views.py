"""
Payment API views.

The license webhook is called by the payment gateway after a transaction
and by internal tools for manual renewals. Both paths end in the same
license extension.
"""

import logging

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, PolymorphicProxySerializer, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.payments.serializers import (
    GatewayNotificationSerializer,
    LicenseExtensionResponseSerializer,
    ManualTriggerSerializer,
    WebhookMessageSerializer,
)
from core.config import LicenseServiceConfig
from core.domain.value_objects import WEBHOOK_SIGNATURE_HEADER
from core.infrastructure.webhook_signature import WebhookSignatureVerifier
from licenses.application.handlers.extend_license_handler import ExtendLicenseHandler
from licenses.application.services.payload_normalizer import PaymentPayloadNormalizer
from licenses.infrastructure.repositories.factory import build_school_license_repository

logger = logging.getLogger(__name__)

IGNORED_TRANSACTION_MESSAGE = "Transaction not successful, no action taken."


class LicenseWebhookView(APIView):
    """View extending a school's license after a payment."""

    normalizer = PaymentPayloadNormalizer()

    @extend_schema(
        operation_id="license_webhook",
        summary="Extend School License",
        description=(
            "Extend a school's license from a payment gateway notification "
            "(signed with the verif-hash header) or a manual renewal request "
            "(no header)."
        ),
        tags=["Payments"],
        parameters=[
            OpenApiParameter(
                name=WEBHOOK_SIGNATURE_HEADER,
                location=OpenApiParameter.HEADER,
                required=False,
                description="Gateway secret hash; omit for manual triggers",
            )
        ],
        request=PolymorphicProxySerializer(
            component_name="LicenseWebhookRequest",
            serializers=[GatewayNotificationSerializer, ManualTriggerSerializer],
            resource_type_field_name=None,
        ),
        responses={
            200: LicenseExtensionResponseSerializer,
            400: WebhookMessageSerializer,
            401: WebhookMessageSerializer,
            404: WebhookMessageSerializer,
            500: WebhookMessageSerializer,
        },
    )
    def post(self, request: Request) -> Response:
        """Extend a school's license."""
        return async_to_sync(self._handle_license_webhook)(request)

    async def _handle_license_webhook(self, request: Request) -> Response:
        """Async handler for the license webhook."""
        config = LicenseServiceConfig.from_settings()
        origin = WebhookSignatureVerifier(config.webhook_secret_hash).authorize(request.headers)

        payload = request.data
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")

        command = self.normalizer.normalize(payload, origin)
        if command is None:
            return Response(
                {"success": True, "message": IGNORED_TRANSACTION_MESSAGE},
                status=status.HTTP_200_OK,
            )

        handler = ExtendLicenseHandler(
            license_repository=build_school_license_repository(config),
        )
        result = await handler.handle(command)

        return Response(result.to_response(), status=status.HTTP_200_OK)
