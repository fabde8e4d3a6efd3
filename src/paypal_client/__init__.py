"""Async PayPal REST client with cached client-credentials authentication.

Importing the package loads a local ``.env`` file through ``paypal_client.config``
so that ``PayPalConfig.from_env`` sees development credentials.
"""

from .client.paypal_client import AuthenticatedClient
from .client.token_manager import TokenCache, TokenManager
from .config import PayPalConfig, configure_logging
from .errors import AuthError, ConfigError, PayPalClientError, RetriesExhaustedError

__all__ = [
    "AuthError",
    "AuthenticatedClient",
    "ConfigError",
    "PayPalClientError",
    "PayPalConfig",
    "RetriesExhaustedError",
    "TokenCache",
    "TokenManager",
    "configure_logging",
]
