"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.
It sets up the routes, the startup checks, and the exception handler.

Design Decisions:
- Use lifespan events for startup/shutdown
- Build the signature verifier at startup so a missing secret stops the process
- Keep GET / as a plain-text liveness probe
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from orgwebhook import __version__
from orgwebhook.config import get_settings
from orgwebhook.logging_config import get_logger, setup_logging
from orgwebhook.webhook import router as webhook_router
from orgwebhook.webhook.security import get_verifier

# Initialize logging first
setup_logging()

logger = get_logger(__name__)

GREETING = "Hello from the organization webhook receiver!"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events for the application.
    """
    settings = get_settings()
    logger.info(
        "Starting organization webhook receiver",
        host=settings.host,
        port=settings.port
    )

    # Fail fast on an unusable signing secret
    try:
        get_verifier()
        logger.info("Configuration validated successfully")
    except Exception as e:
        logger.error(
            "Configuration validation failed",
            error=str(e)
        )
        raise

    yield

    logger.info("Shutting down organization webhook receiver")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Organization Webhook Receiver",
        description="Verifies and acknowledges organization webhooks",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(webhook_router)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "type": type(exc).__name__
            }
        )

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness probe."""
        return GREETING

    return app


# Create the application instance
app = create_app()
