"""
Configuration Management Module

This module handles all application configuration using Pydantic Settings.
Configuration is loaded from environment variables with strong typing and validation.

Design Decisions:
- Load settings once per process and hand them to the request path explicitly
- A missing signing secret is a startup failure, never a per-request error
- Keep the environment variable names the provider integration expects
  (WEBHOOK_SECRET, PORT)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The signing secret is loaded from the environment only,
    never hardcoded or logged.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # =========================================================================
    # Webhook Configuration
    # =========================================================================
    webhook_secret: str = Field(
        description="Shared signing secret for webhook verification (whsec_...)"
    )

    # =========================================================================
    # Server Configuration
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server"
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port to bind the server"
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_json_format: bool = Field(
        default=True,
        description="Enable JSON logging format"
    )

    log_requests: bool = Field(
        default=False,
        description="Enable uvicorn access logging"
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("webhook_secret")
    @classmethod
    def validate_webhook_secret(cls, v: str) -> str:
        """Reject an empty signing secret."""
        v = v.strip()
        if not v:
            raise ValueError("WEBHOOK_SECRET must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Raises pydantic's ValidationError when WEBHOOK_SECRET is unset,
    which aborts startup.

    Returns:
        Settings instance
    """
    return Settings()
