"""Transmission settings loaded from environment variables.

Uses pydantic-settings so every field can be overridden via env vars.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class TransmissionOptions(BaseSettings):
    """Delivery options sent with every transmission."""

    model_config = {"env_prefix": "SPARKPOST_OPTIONS_"}

    start_time: str = Field(
        default="",
        description="Scheduled delivery time (ISO-8601); empty sends immediately",
    )
    open_tracking: bool = Field(default=True, description="Track message opens")
    click_tracking: bool = Field(default=True, description="Track link clicks")
    transactional: bool = Field(
        default=False,
        description="Mark the message as transactional (ignores unsubscribe lists)",
    )
    sandbox: bool = Field(default=False, description="Send through the sandbox domain")
    skip_suppression: bool = Field(
        default=False,
        description="Deliver even to addresses on the suppression list",
    )


class SparkPostAPIConfig(BaseSettings):
    """Transmissions API HTTP client settings."""

    model_config = {"env_prefix": "SPARKPOST_API_"}

    base_url: str = Field(
        default="https://api.sparkpost.com",
        description="Base URL of the SparkPost API",
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP request timeout")
    api_key: SecretStr | None = Field(
        default=None,
        description="Value sent verbatim as the Authorization header",
    )


class LoggingConfig(BaseSettings):
    """Log output settings."""

    model_config = {"env_prefix": "SPARKPOST_LOG_"}

    json_output: bool = Field(default=True, description="Emit JSON lines instead of console output")
    level: str = Field(default="INFO", description="Root log level name")
