"""
Tests for Event Dispatcher

Tests the event type to response mapping.
"""

import pytest

from orgwebhook.models import Event, EventType
from orgwebhook.webhook.dispatcher import (
    EVENT_OUTCOMES,
    UNKNOWN_EVENT_OUTCOME,
    dispatch_event,
)


class TestDispatchEvent:
    """Test suite for dispatch_event."""

    def test_organization_created(self):
        """Test organization.created is acknowledged."""
        outcome = dispatch_event(Event(type="organization.created", data={"id": "org_1"}))

        assert outcome.status_code == 200
        assert outcome.message == "Organization successfully created"

    def test_organization_updated(self):
        """Test organization.updated is acknowledged."""
        outcome = dispatch_event(Event(type="organization.updated"))

        assert outcome.status_code == 200
        assert outcome.message == "Organization successfully updated"

    def test_membership_updated_rejected(self):
        """Test organizationMembership.updated is answered with 400."""
        outcome = dispatch_event(Event(type="organizationMembership.updated"))

        assert outcome.status_code == 400
        assert outcome.message == "Interviewer not found"

    def test_membership_created_falls_through(self):
        """Test organizationMembership.created has no case of its own."""
        outcome = dispatch_event(Event(type="organizationMembership.created"))

        assert outcome is UNKNOWN_EVENT_OUTCOME

    @pytest.mark.parametrize("event_type", ["foo.bar", "user.created", "Organization.Created"])
    def test_unknown_types(self, event_type: str):
        """Test unrecognized types get the default outcome."""
        outcome = dispatch_event(Event(type=event_type))

        assert outcome.status_code == 400
        assert outcome.message == "Unknown event type"

    def test_response_body(self):
        """Test the outcome renders to the JSON body."""
        outcome = dispatch_event(Event(type="organization.deleted"))

        assert outcome.to_response().model_dump() == {"message": "Interviewer already exists"}

    def test_handled_outcomes_log(self):
        """Test every handled event type has a log level."""
        assert EventType.ORGANIZATION_MEMBERSHIP_CREATED not in EVENT_OUTCOMES
        for outcome in EVENT_OUTCOMES.values():
            assert outcome.log_level is not None
        assert UNKNOWN_EVENT_OUTCOME.log_level is None
