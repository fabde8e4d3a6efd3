"""Fixed endpoints and time constants for the PayPal REST API."""

LIVE_URL = "https://api-m.paypal.com"
SANDBOX_URL = "https://api-m.sandbox.paypal.com"

OAUTH_TOKEN_PATH = "/v1/oauth2/token"

ONE_MINUTE_MS = 60_000
# Tokens expiring within this window are treated as already expired
REFRESH_MARGIN_MS = ONE_MINUTE_MS

# HTTP status codes
HTTP_OK = 200
HTTP_UNAUTHORIZED = 401


__all__ = [
    "HTTP_OK",
    "HTTP_UNAUTHORIZED",
    "LIVE_URL",
    "OAUTH_TOKEN_PATH",
    "ONE_MINUTE_MS",
    "REFRESH_MARGIN_MS",
    "SANDBOX_URL",
]
