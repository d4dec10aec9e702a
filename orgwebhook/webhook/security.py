"""
Webhook Security Module

This module verifies webhook deliveries signed by Svix on behalf of the
identity provider. The HMAC construction and the timestamp tolerance window
are delegated to the svix library.

Design Decisions:
- Build the verifier once at startup so a bad secret fails fast
- Verify the raw body exactly as received, never a re-serialized copy
- Return an explicit result instead of raising across the library boundary
- Collapse every verification failure to one client-facing outcome
"""

from functools import lru_cache

from pydantic import ValidationError
from svix.webhooks import Webhook, WebhookVerificationError

from orgwebhook.config import get_settings
from orgwebhook.logging_config import get_logger
from orgwebhook.models import (
    Event,
    VerificationFailed,
    VerificationHeaders,
    VerificationResult,
    Verified,
)

logger = get_logger(__name__)

SECRET_PREFIX = "whsec_"


class ConfigurationError(Exception):
    """Raised when the signing secret cannot be used."""
    pass


class SignatureVerifier:
    """
    Verifies signed webhook deliveries against the shared secret.

    Usage:
        verifier = SignatureVerifier(settings.webhook_secret)
        result = verifier.verify(raw_body, headers)
    """

    def __init__(self, secret: str):
        """
        Initialize the verifier.

        Args:
            secret: Signing secret, usually prefixed with "whsec_"

        Raises:
            ConfigurationError: If the secret is empty or not valid base64
        """
        key = secret[len(SECRET_PREFIX):] if secret.startswith(SECRET_PREFIX) else secret
        if not key.strip("=").strip():
            raise ConfigurationError("You need a WEBHOOK_SECRET in your environment")

        try:
            self._webhook = Webhook(secret)
        except Exception as e:
            # binascii.Error for bad base64; other error classes vary by svix release
            raise ConfigurationError(f"WEBHOOK_SECRET is not a valid signing secret: {e}")

    def verify(
        self,
        raw_body: bytes,
        headers: VerificationHeaders
    ) -> VerificationResult:
        """
        Verify a delivery and parse its event.

        Args:
            raw_body: Raw request body bytes
            headers: The three delivery headers

        Returns:
            Verified with the parsed event, or VerificationFailed
        """
        try:
            payload = raw_body.decode("utf-8")
        except UnicodeDecodeError:
            return VerificationFailed(reason="Body is not valid UTF-8")

        # Only the signature check is delegated; svix 2.x returns nothing from verify
        try:
            self._webhook.verify(payload, headers.as_dict())
        except WebhookVerificationError as e:
            return VerificationFailed(reason=str(e))
        except ValueError as e:
            # Malformed signature list, bad base64, or non-JSON body on svix 1.x
            return VerificationFailed(reason=f"Malformed delivery: {e}")

        try:
            event = Event.model_validate_json(payload)
        except ValidationError as e:
            return VerificationFailed(reason=f"Payload is not an event: {e.error_count()} errors")

        logger.debug("Webhook signature verified", delivery_id=headers.id)
        return Verified(event=event)


@lru_cache()
def get_verifier() -> SignatureVerifier:
    """
    Get the process-wide verifier built from the configured secret.

    Used as a FastAPI dependency so the secret is passed into the
    request path explicitly.
    """
    return SignatureVerifier(get_settings().webhook_secret)
