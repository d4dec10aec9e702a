"""
Test Configuration

Pytest configuration and fixtures for the test suite.
"""

import base64
import json
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generator, Optional, Tuple

import pytest

TEST_SECRET = "whsec_" + base64.b64encode(b"orgwebhook-test-signing-secret").decode()
OTHER_SECRET = "whsec_" + base64.b64encode(b"some-other-signing-secret").decode()

# Settings are cached on first use, so the environment is seeded before the app is imported
os.environ["WEBHOOK_SECRET"] = TEST_SECRET
os.environ["LOG_JSON_FORMAT"] = "false"

from fastapi.testclient import TestClient  # noqa: E402
from svix.webhooks import Webhook  # noqa: E402

from orgwebhook.main import app  # noqa: E402

SignedDelivery = Tuple[bytes, Dict[str, str]]


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for synchronous tests."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sign_delivery() -> Callable[..., SignedDelivery]:
    """
    Factory that signs a payload the way Svix does.

    Returns the raw body and the delivery headers.
    """
    def _sign(
        payload: Any,
        secret: str = TEST_SECRET,
        msg_id: str = "msg_2TCTsLAkQhPJQ2c1L0SRvxB0bVd",
        timestamp: Optional[datetime] = None
    ) -> SignedDelivery:
        timestamp = timestamp or datetime.now(timezone.utc)
        body = payload if isinstance(payload, str) else json.dumps(payload)
        signature = Webhook(secret).sign(msg_id, timestamp, body)
        headers = {
            "Content-Type": "application/json",
            "svix-id": msg_id,
            "svix-timestamp": str(int(timestamp.timestamp())),
            "svix-signature": signature,
        }
        return body.encode("utf-8"), headers

    return _sign


@pytest.fixture
def organization_payload() -> Callable[[str], Dict[str, Any]]:
    """Sample organization webhook payload for a given event type."""
    def _payload(event_type: str = "organization.created") -> Dict[str, Any]:
        return {
            "data": {
                "id": "org_29w9UfBZbmJYr2yVnUzANhXKbzz",
                "name": "Acme Inc",
                "slug": "acme-inc",
                "members_count": 3,
                "created_at": 1654013202977,
                "public_metadata": {"plan": "pro"},
            },
            "object": "event",
            "type": event_type,
            "timestamp": 1654013202977,
            "instance_id": "ins_123",
        }

    return _payload


@pytest.fixture
def signing_secret() -> str:
    """Signing secret the app under test is configured with."""
    return TEST_SECRET


@pytest.fixture
def foreign_secret() -> str:
    """A valid signing secret the app does not know."""
    return OTHER_SECRET
