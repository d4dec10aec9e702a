"""
Webhook Package

This package contains webhook handling components:
- handler: FastAPI route handler
- security: Webhook signature verification
- dispatcher: Event type to response mapping
"""

from orgwebhook.webhook.handler import router

__all__ = ["router"]
