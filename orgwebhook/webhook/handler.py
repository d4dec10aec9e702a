"""
Webhook Handler Module

This module defines the FastAPI endpoint that receives organization
webhooks from the identity provider.

Design Decisions:
- Read the raw body before anything else; the signature covers exact bytes
- Keep the request plumbing separate from handle_delivery so the
  receive -> verify -> dispatch flow can be exercised without HTTP
- No state is kept between deliveries
"""

from typing import Mapping, Tuple

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from orgwebhook.logging_config import get_logger
from orgwebhook.models import (
    VerificationFailed,
    VerificationHeaders,
    WebhookResponse,
)
from orgwebhook.webhook.dispatcher import dispatch_event
from orgwebhook.webhook.security import SignatureVerifier, get_verifier

logger = get_logger(__name__)

router = APIRouter(tags=["webhook"])

MISSING_HEADERS_MESSAGE = "Error occurred -- no svix headers"
VERIFICATION_FAILED_MESSAGE = "Error occurred -- could not verify webhook"


def handle_delivery(
    raw_body: bytes,
    headers: Mapping[str, str],
    verifier: SignatureVerifier
) -> Tuple[int, WebhookResponse]:
    """
    Verify a webhook delivery and dispatch it by event type.

    Args:
        raw_body: Raw request body bytes, exactly as signed
        headers: Request headers
        verifier: Verifier bound to the configured signing secret

    Returns:
        Tuple of HTTP status code and response body
    """
    delivery_headers = VerificationHeaders.from_headers(headers)
    if delivery_headers is None:
        logger.warning("Missing webhook delivery headers")
        return status.HTTP_400_BAD_REQUEST, WebhookResponse(message=MISSING_HEADERS_MESSAGE)

    result = verifier.verify(raw_body, delivery_headers)
    if isinstance(result, VerificationFailed):
        logger.warning(
            "Error verifying webhook",
            delivery_id=delivery_headers.id,
            reason=result.reason
        )
        return status.HTTP_400_BAD_REQUEST, WebhookResponse(message=VERIFICATION_FAILED_MESSAGE)

    event = result.event
    logger.info(
        "Webhook received",
        event_type=event.type,
        delivery_id=delivery_headers.id
    )

    outcome = dispatch_event(event)
    return outcome.status_code, outcome.to_response()


@router.post("/webhook", response_model=WebhookResponse)
async def receive_webhook(
    request: Request,
    verifier: SignatureVerifier = Depends(get_verifier)
) -> JSONResponse:
    """
    Identity provider webhook endpoint.

    Every outcome is a JSON body of the form {"message": ...}.
    """
    raw_body = await request.body()

    status_code, body = handle_delivery(raw_body, request.headers, verifier)

    return JSONResponse(status_code=status_code, content=body.model_dump())
