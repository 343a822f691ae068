"""
Webhook signature verification.

The payment gateway sends a pre-shared secret hash in the ``verif-hash``
header. Requests without the header are manual triggers from internal
callers and are not checked.
"""
import hmac
import logging
from typing import Mapping, Optional

from core.domain.exceptions import UnauthorizedWebhookError
from core.domain.value_objects import WEBHOOK_SIGNATURE_HEADER, RequestOrigin

logger = logging.getLogger(__name__)


class WebhookSignatureVerifier:
    """Authorizes requests against the configured secret hash."""

    def __init__(self, secret_hash: Optional[str]):
        """
        Initialize verifier.

        Args:
            secret_hash: Shared secret configured on the gateway dashboard
        """
        self.secret_hash = secret_hash

    @staticmethod
    def verify_signature(signature: str, secret_hash: str) -> bool:
        """
        Compare a received signature with the secret.

        Args:
            signature: Header value sent by the gateway
            secret_hash: Configured secret

        Returns:
            True if they match exactly
        """
        return hmac.compare_digest(signature.encode(), secret_hash.encode())

    def authorize(self, headers: Mapping[str, str]) -> RequestOrigin:
        """
        Resolve the request origin and authorize webhook requests.

        Args:
            headers: Case-insensitive request headers

        Returns:
            The resolved RequestOrigin

        Raises:
            UnauthorizedWebhookError: If a webhook signature is wrong or no
                secret is configured
        """
        origin = RequestOrigin.from_headers(headers)
        if origin is RequestOrigin.MANUAL:
            logger.info("Manual trigger received, skipping signature check")
            return origin

        signature = headers.get(WEBHOOK_SIGNATURE_HEADER)
        if (
            not self.secret_hash
            or not signature
            or not self.verify_signature(signature, self.secret_hash)
        ):
            logger.error("Unauthorized: Signature mismatch or missing hash")
            raise UnauthorizedWebhookError()
        return origin
