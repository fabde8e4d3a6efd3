"""Exception hierarchy for the PayPal client.

Transport failures raised by ``httpx`` are not wrapped; they propagate to the
caller unchanged.
"""


class PayPalClientError(Exception):
    """Base client error."""


class ConfigError(PayPalClientError):
    """Raised when the client configuration is missing or invalid."""


class AuthError(PayPalClientError):
    """Raised when the token endpoint refuses to issue an access token.

    Attributes:
        status_code: HTTP status returned by the token endpoint.
        status_text: Reason phrase (or a description of the malformed body).

    """

    def __init__(self, status_code: int, status_text: str) -> None:
        """Initialize with the token endpoint's status and reason phrase."""
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Token request failed with {status_code}: {status_text}")


class RetriesExhaustedError(PayPalClientError):
    """Raised when a request keeps receiving 401 after the allowed retries.

    Attributes:
        attempts: Attempt counter reached when the client gave up.

    """

    def __init__(self, attempts: int) -> None:
        """Initialize with the final attempt counter."""
        self.attempts = attempts
        super().__init__(f"Invalid token after max tries ({attempts} attempts)")


__all__ = ["AuthError", "ConfigError", "PayPalClientError", "RetriesExhaustedError"]
