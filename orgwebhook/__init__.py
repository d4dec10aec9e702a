"""
Organization Webhook Receiver

A small service that verifies signed organization and membership webhooks
from the identity provider and acknowledges them by event type.
"""

__version__ = "1.0.0"
