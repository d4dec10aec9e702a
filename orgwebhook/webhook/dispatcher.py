"""
Event Dispatcher Module

Maps a verified event's type to the acknowledgement returned to the
provider. Database writes for organizations and memberships are not wired
in yet; each handled event only logs.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from fastapi import status

from orgwebhook.logging_config import get_logger
from orgwebhook.models import Event, EventType, WebhookResponse

logger = get_logger(__name__)


@dataclass(frozen=True)
class EventOutcome:
    """Response and log side effect for one event type."""
    status_code: int
    message: str
    log_level: Optional[int] = None

    def to_response(self) -> WebhookResponse:
        return WebhookResponse(message=self.message)


# TODO: confirm the organization.deleted and membership messages with the
# product owner; they read like copies from the interviewer endpoints.
EVENT_OUTCOMES: Dict[EventType, EventOutcome] = {
    EventType.ORGANIZATION_CREATED: EventOutcome(
        status.HTTP_200_OK, "Organization successfully created", logging.INFO
    ),
    EventType.ORGANIZATION_UPDATED: EventOutcome(
        status.HTTP_200_OK, "Organization successfully updated", logging.INFO
    ),
    EventType.ORGANIZATION_DELETED: EventOutcome(
        status.HTTP_200_OK, "Interviewer already exists", logging.INFO
    ),
    EventType.ORGANIZATION_MEMBERSHIP_UPDATED: EventOutcome(
        status.HTTP_400_BAD_REQUEST, "Interviewer not found", logging.WARNING
    ),
    EventType.ORGANIZATION_MEMBERSHIP_DELETED: EventOutcome(
        status.HTTP_400_BAD_REQUEST, "Interviewer not found", logging.WARNING
    ),
}

# organizationMembership.created has no entry and lands here as well
UNKNOWN_EVENT_OUTCOME = EventOutcome(status.HTTP_400_BAD_REQUEST, "Unknown event type")


def dispatch_event(event: Event) -> EventOutcome:
    """
    Resolve the outcome for a verified event and emit its log line.

    Args:
        event: Verified webhook event

    Returns:
        EventOutcome with status code and response message
    """
    event_type = event.event_type
    outcome = EVENT_OUTCOMES.get(event_type) if event_type else None

    if outcome is None:
        return UNKNOWN_EVENT_OUTCOME

    logger.log(
        outcome.log_level,
        outcome.message,
        event_type=event.type,
        resource_id=event.data.get("id")
    )
    return outcome
