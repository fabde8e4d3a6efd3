"""Configuration management for the PayPal client.

This module defines the ``PayPalConfig`` model and helpers to load configuration
from environment variables, plus an opt-in logging setup for applications that
embed the client.
"""

import logging
import os
from typing import Any, Self

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import LIVE_URL, SANDBOX_URL
from .errors import ConfigError

# Load variables from a local .env file for development convenience
load_dotenv()

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


class PayPalConfig(BaseModel):
    """Credentials and transport settings for one PayPal REST application."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(min_length=1)
    secret: str = Field(min_length=1, repr=False)
    live: bool = True
    timeout_ms: int = Field(default=1000, ge=1)
    max_retries: int = Field(default=5, ge=0)

    @property
    def base_url_str(self) -> str:
        """Return the live or sandbox base URL as a plain string."""
        return LIVE_URL if self.live else SANDBOX_URL

    @property
    def timeout_s(self) -> float:
        """Return the per-request timeout in seconds."""
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls) -> Self:
        """Build a configuration object from environment variables."""
        client_id = os.getenv("PAYPAL_CLIENT_ID")
        secret = os.getenv("PAYPAL_SECRET")
        if not (client_id and secret):
            msg = "PAYPAL_CLIENT_ID and PAYPAL_SECRET must be set to reach the PayPal API."
            raise ConfigError(msg)
        raw_config: dict[str, Any] = {
            "client_id": client_id,
            "secret": secret,
            "live": os.getenv("PAYPAL_LIVE"),
            "timeout_ms": os.getenv("PAYPAL_TIMEOUT_MS"),
            "max_retries": os.getenv("PAYPAL_MAX_RETRIES"),
        }
        # Unset optional variables fall back to the model defaults
        raw_config = {key: value for key, value in raw_config.items() if value is not None}
        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid PayPal configuration: {messages}"
            raise ConfigError(msg) from exc


def configure_logging(level: str | None = None) -> None:
    """Configure root logging using ``LOG_LEVEL`` (default ``INFO``)."""
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "PayPalConfig", "configure_logging"]
