"""
Serializers for payment API endpoints.

The webhook accepts two payload shapes, so request bodies are read as
plain JSON; these serializers describe them for the OpenAPI schema.
"""

from rest_framework import serializers


class GatewayMetaSerializer(serializers.Serializer):
    """Serializer for gateway transaction metadata."""

    schoolCode = serializers.CharField()


class GatewayNotificationSerializer(serializers.Serializer):
    """Serializer for a payment gateway notification."""

    status = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    tx_ref = serializers.CharField(required=False)
    meta = GatewayMetaSerializer()


class ManualTriggerSerializer(serializers.Serializer):
    """Serializer for a manual renewal request."""

    schoolCode = serializers.CharField()
    plan = serializers.CharField(required=False)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)


class LicenseExtensionResponseSerializer(serializers.Serializer):
    """Serializer for a successful extension."""

    success = serializers.BooleanField()
    school = serializers.CharField()
    expiry = serializers.CharField()
    plan = serializers.CharField()


class WebhookMessageSerializer(serializers.Serializer):
    """Serializer for ignored transactions and errors."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    code = serializers.CharField(required=False)
