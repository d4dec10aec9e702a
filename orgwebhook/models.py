"""
Data Models Module

This module defines the models used throughout the application.

Design Decisions:
- Use Pydantic models for the verified event and the response body
- Accept any event type value on the model; unknown types are routed
  by the dispatcher instead of being rejected at parse time
- Verification returns an explicit result value rather than raising
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class EventType(str, Enum):
    """Organization event types delivered by the identity provider."""
    ORGANIZATION_CREATED = "organization.created"
    ORGANIZATION_UPDATED = "organization.updated"
    ORGANIZATION_DELETED = "organization.deleted"
    ORGANIZATION_MEMBERSHIP_CREATED = "organizationMembership.created"
    ORGANIZATION_MEMBERSHIP_UPDATED = "organizationMembership.updated"
    ORGANIZATION_MEMBERSHIP_DELETED = "organizationMembership.deleted"


# =============================================================================
# Webhook Models
# =============================================================================

class Event(BaseModel):
    """
    A verified webhook event.

    Only built from a payload whose signature has been checked.

    Attributes:
        type: Event type as sent by the provider; anything that is not a
            known event type string is dispatched as unknown
        data: Event resource (organization or membership) as nested JSON
        object: "event" for every provider delivery; not enforced
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Any = Field(default=None, description="Event type, e.g. organization.created")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event resource")
    object: Any = "event"

    @property
    def event_type(self) -> Optional[EventType]:
        """Get the known event type, or None for an unrecognized one."""
        try:
            return EventType(self.type)
        except (TypeError, ValueError):
            return None


class WebhookResponse(BaseModel):
    """JSON body returned for every webhook delivery."""
    message: str


# =============================================================================
# Verification Models
# =============================================================================

# Delivery header names set by Svix on every webhook
HEADER_ID = "svix-id"
HEADER_TIMESTAMP = "svix-timestamp"
HEADER_SIGNATURE = "svix-signature"


@dataclass(frozen=True)
class VerificationHeaders:
    """The three delivery headers required to verify a webhook."""
    id: str
    timestamp: str
    signature: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["VerificationHeaders"]:
        """
        Extract the delivery headers from a request header mapping.

        Args:
            headers: Request headers (Starlette headers are case-insensitive)

        Returns:
            VerificationHeaders, or None if any header is missing or empty
        """
        msg_id = headers.get(HEADER_ID)
        timestamp = headers.get(HEADER_TIMESTAMP)
        signature = headers.get(HEADER_SIGNATURE)

        if not (msg_id and timestamp and signature):
            return None

        return cls(id=msg_id, timestamp=timestamp, signature=signature)

    def as_dict(self) -> Dict[str, str]:
        """Header mapping in the form the svix verifier expects."""
        return {
            HEADER_ID: self.id,
            HEADER_TIMESTAMP: self.timestamp,
            HEADER_SIGNATURE: self.signature,
        }


@dataclass(frozen=True)
class Verified:
    """Successful verification carrying the parsed event."""
    event: Event


@dataclass(frozen=True)
class VerificationFailed:
    """Failed verification with a reason for the logs."""
    reason: str


VerificationResult = Union[Verified, VerificationFailed]
